"""Helper utilities for writing site manifests and configs in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Dict, List, Optional

from sitelinks.manifest import SiteManifest, load_manifest


class SiteBuilder:
    """Collects pages for a throwaway site and writes its manifest."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "site"
        self.root.mkdir()
        self._pages: List[Dict[str, object]] = []
        self._permalinks: Dict[str, str] = {}

    def page(
        self,
        path: str,
        permalink: str,
        content: str = "",
        html: Optional[str] = None,
    ) -> "SiteBuilder":
        """Register a page; ``content`` is dedented like a Markdown file."""
        entry: Dict[str, object] = {
            "path": path,
            "permalink": permalink,
            "content": textwrap.dedent(content).lstrip("\n"),
        }
        if html is not None:
            entry["html"] = html
        self._pages.append(entry)
        return self

    def permalink(self, path: str, url: str) -> "SiteBuilder":
        self._permalinks[path] = url
        return self

    def config(self, text: str, name: str = "sitelinks.yml") -> Path:
        path = self.root / name
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return path

    def write(self) -> Path:
        """Write the manifest to disk and return its path."""
        path = self.root / "manifest.json"
        payload = {"pages": self._pages, "permalinks": self._permalinks}
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def manifest(self) -> SiteManifest:
        return load_manifest(self.write())


__all__ = ["SiteBuilder"]

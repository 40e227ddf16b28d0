"""Site manifest: the pages and permalinks produced by a site build."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


class ManifestError(RuntimeError):
    """Raised when the manifest file is missing or malformed."""


@dataclass
class PageRecord:
    """One rendered page of the site."""

    path: str
    permalink: str
    content: str = ""
    html: Optional[str] = None


@dataclass
class SiteManifest:
    """Normalized view of a built site for link checking."""

    pages: List[PageRecord] = field(default_factory=list)
    extra_permalinks: Dict[str, str] = field(default_factory=dict)

    @property
    def permalinks(self) -> Dict[str, str]:
        table = dict(self.extra_permalinks)
        table.update({page.path: page.permalink for page in self.pages})
        return table

    def pages_by_path(self) -> Dict[str, PageRecord]:
        return {page.path: page for page in self.pages}


def load_manifest(manifest_path: Path) -> SiteManifest:
    """Load a JSON manifest written by the site build."""
    path = Path(manifest_path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse {path.name}: {exc}") from exc
    return parse_manifest(data)


def parse_manifest(data: Any) -> SiteManifest:
    if not isinstance(data, dict):
        raise ManifestError("Manifest must contain an object at the root")

    raw_pages = data.get("pages")
    if raw_pages is None:
        raw_pages = []
    if not isinstance(raw_pages, list):
        raise ManifestError("Manifest 'pages' must be a list")

    pages: List[PageRecord] = []
    for index, entry in enumerate(raw_pages):
        if not isinstance(entry, dict):
            raise ManifestError(f"Page #{index} must be an object")
        page_path = entry.get("path")
        permalink = entry.get("permalink")
        if not isinstance(page_path, str) or not isinstance(permalink, str):
            raise ManifestError(f"Page #{index} needs string 'path' and 'permalink' fields")
        html = entry.get("html")
        pages.append(
            PageRecord(
                path=page_path,
                permalink=permalink,
                content=str(entry.get("content") or ""),
                html=html if isinstance(html, str) else None,
            )
        )

    extra = data.get("permalinks")
    if extra is None:
        extra = {}
    if not isinstance(extra, dict):
        raise ManifestError("Manifest 'permalinks' must be an object")
    extra_permalinks = {str(key): str(value) for key, value in extra.items()}

    return SiteManifest(pages=pages, extra_permalinks=extra_permalinks)


__all__ = ["ManifestError", "PageRecord", "SiteManifest", "load_manifest", "parse_manifest"]

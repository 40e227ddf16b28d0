"""Tests for sitelinks.manifest."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitelinks.manifest import ManifestError, load_manifest, parse_manifest
from tests._fixtures.site_builder import SiteBuilder


def test_manifest_builds_permalink_table(site_builder: SiteBuilder) -> None:
    site_builder.page("about.md", "https://example.com/about/", "About us", "<h1 id=\"about\">")
    site_builder.permalink("blog/_index.md", "https://example.com/blog/")

    manifest = site_builder.manifest()

    assert manifest.permalinks == {
        "about.md": "https://example.com/about/",
        "blog/_index.md": "https://example.com/blog/",
    }
    pages = manifest.pages_by_path()
    assert list(pages) == ["about.md"]
    assert pages["about.md"].html == "<h1 id=\"about\">"
    assert pages["about.md"].content == "About us"


def test_manifest_page_without_html(site_builder: SiteBuilder) -> None:
    site_builder.page("draft.md", "https://example.com/draft/")

    manifest = site_builder.manifest()

    page = manifest.pages_by_path()["draft.md"]
    assert page.html is None
    assert page.content == ""


def test_parse_manifest_treats_missing_sections_as_empty() -> None:
    manifest = parse_manifest({"pages": None})

    assert manifest.pages == []
    assert manifest.permalinks == {}


def test_load_manifest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError):
        load_manifest(tmp_path / "nope.json")


def test_load_manifest_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError):
        load_manifest(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"pages": {}},
        {"pages": ""},
        {"pages": 0},
        {"pages": ["about.md"]},
        {"pages": [{"path": "about.md"}]},
        {"permalinks": ["x"]},
        {"permalinks": []},
        {"permalinks": ""},
    ],
)
def test_parse_manifest_rejects_malformed_data(data: object) -> None:
    with pytest.raises(ManifestError):
        parse_manifest(data)

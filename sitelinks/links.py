"""Internal link resolution and anchor validation."""

from __future__ import annotations

import re
from typing import List, Mapping
from urllib.parse import unquote

from .models import ResolvedInternalLink

INTERNAL_PREFIX = "@/"

_LINK_PATTERN = re.compile(
    # Label allows one level of nested brackets, e.g. a link wrapped around an image.
    r"\[((?:[^\[\]]|\[[^\[\]]*\])*)\]"
    r"\(\s*(?:<([^<>\n]+)>|([^)\s]+))(?:\s+[\"'][^\"']*[\"'])?\s*\)"
)


class LinkError(RuntimeError):
    """Base class for broken links and anchors."""


class LinkNotFound(LinkError):
    """Raised when an internal link has no entry in the permalink table."""

    def __init__(self, link: str) -> None:
        super().__init__(f"Relative link {link} not found.")
        self.link = link


class AnchorNotFound(LinkError):
    """Raised when a page body has no element addressable by the anchor."""

    def __init__(self, anchor: str) -> None:
        super().__init__(f"Anchor `#{anchor}` not found on page")
        self.anchor = anchor


class ExternalLinkError(LinkError):
    """Raised by fetchers when an external URL cannot be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"External link {url} is broken: {reason}")
        self.url = url
        self.reason = reason


def resolve_internal_link(link: str, permalinks: Mapping[str, str]) -> ResolvedInternalLink:
    """Resolve an ``@/posts/something.md#hey`` link to its absolute URL.

    The path part may be percent-encoded; it is decoded before the lookup. The
    anchor is appended to the permalink exactly as written.
    """
    clean_link = link[len(INTERNAL_PREFIX):] if link.startswith(INTERNAL_PREFIX) else link
    path, has_anchor, anchor = clean_link.partition("#")
    decoded = unquote(path, encoding="utf-8", errors="replace")

    target = permalinks.get(decoded)
    if target is None:
        raise LinkNotFound(link)

    if has_anchor:
        return ResolvedInternalLink(
            permalink=f"{target}#{anchor}", md_path=decoded, anchor=anchor
        )
    return ResolvedInternalLink(permalink=target, md_path=decoded, anchor=None)


def anchor_candidates(anchor: str) -> List[str]:
    """Return the attribute spellings accepted as a definition of ``anchor``."""
    return [
        f" {attr}={quote}{anchor}{quote}"
        for attr in ("id", "ID", "name", "NAME")
        for quote in ("", "'", '"')
    ]


def check_page_for_anchor(url: str, body: str) -> None:
    """Raise ``AnchorNotFound`` unless ``body`` defines the anchor of ``url``.

    A ``url`` without ``#`` is taken to be the bare anchor name. Matching is a
    plain substring search, so ``id = "x"`` is not recognised and an unquoted
    ``id=x`` also matches ``id=xyz``.
    """
    _, has_anchor, anchor = url.partition("#")
    if not has_anchor:
        anchor = url

    if any(candidate in body for candidate in anchor_candidates(anchor)):
        return
    raise AnchorNotFound(anchor)


def extract_links(markdown: str) -> List[str]:
    """Return inline Markdown link targets in document order."""
    targets: List[str] = []
    for match in _LINK_PATTERN.finditer(markdown):
        label, bracketed, bare = match.groups()
        targets.extend(extract_links(label))
        targets.append(bracketed if bracketed is not None else bare)
    return targets


def is_internal_link(target: str) -> bool:
    return target.startswith(INTERNAL_PREFIX)


def is_external_link(target: str) -> bool:
    return target.startswith(("http://", "https://"))


__all__ = [
    "AnchorNotFound",
    "ExternalLinkError",
    "LinkError",
    "LinkNotFound",
    "anchor_candidates",
    "check_page_for_anchor",
    "extract_links",
    "is_external_link",
    "is_internal_link",
    "resolve_internal_link",
]

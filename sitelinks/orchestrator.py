"""Link check runner coordinating resolution, anchor validation and policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from .config import LinkChecker, LinkCheckerLevel
from .links import (
    AnchorNotFound,
    ExternalLinkError,
    LinkNotFound,
    check_page_for_anchor,
    extract_links,
    is_external_link,
    is_internal_link,
    resolve_internal_link,
)
from .logging import get_logger
from .manifest import PageRecord, SiteManifest
from .models import LinkCheckReport, LinkIssue, ResolvedInternalLink
from .policy import level_for, should_check, should_check_anchor

Fetcher = Callable[[str], str]


@dataclass
class _PendingAnchor:
    source: str
    link: str
    resolved: ResolvedInternalLink


class LinkCheckRunner:
    """Checks every link of a site manifest against a ``LinkChecker`` policy."""

    def __init__(self, policy: Optional[LinkChecker] = None, *, fetcher: Optional[Fetcher] = None) -> None:
        self.policy = policy or LinkChecker()
        self.fetcher = fetcher
        self.logger = get_logger("orchestrator")

    def run(self, manifest: SiteManifest) -> LinkCheckReport:
        report = LinkCheckReport()
        permalinks = manifest.permalinks
        pages_by_path = manifest.pages_by_path()
        pending: List[_PendingAnchor] = []
        fetched: Dict[str, Union[str, ExternalLinkError]] = {}

        self.logger.info("Checking links across %d page(s)", len(manifest.pages))
        for page in manifest.pages:
            for target in extract_links(page.content):
                if is_internal_link(target):
                    resolved = self._check_internal(page, target, permalinks, report)
                    if resolved is not None and resolved.anchor is not None:
                        if self._anchor_exempt(target, resolved.permalink):
                            self.logger.debug("Skipping anchor check for %s", target)
                        else:
                            pending.append(_PendingAnchor(page.path, target, resolved))
                elif is_external_link(target):
                    self._check_external(page, target, fetched, report)

        # Anchors need every target page rendered, so they run last.
        for item in pending:
            self._check_internal_anchor(pages_by_path, item, report)

        self.logger.info(
            "Checked %d link(s) and %d anchor(s); %d skipped, %d error(s), %d warning(s)",
            report.checked,
            report.anchors_checked,
            report.skipped,
            len(report.errors),
            len(report.warnings),
        )
        return report

    def _check_internal(
        self,
        page: PageRecord,
        target: str,
        permalinks: Dict[str, str],
        report: LinkCheckReport,
    ) -> Optional[ResolvedInternalLink]:
        decision = should_check(target, self.policy, is_external=False)
        if not decision.check:
            self.logger.debug("Skipping internal link %s in %s", target, page.path)
            report.skipped += 1
            return None

        report.checked += 1
        try:
            return resolve_internal_link(target, permalinks)
        except LinkNotFound as exc:
            self._record(report, page.path, target, str(exc), decision.level, external=False)
            return None

    def _check_internal_anchor(
        self,
        pages_by_path: Dict[str, PageRecord],
        item: _PendingAnchor,
        report: LinkCheckReport,
    ) -> None:
        report.anchors_checked += 1
        level = level_for(self.policy, is_external=False)
        target_page = pages_by_path.get(item.resolved.md_path)
        if target_page is None or target_page.html is None:
            missing = AnchorNotFound(item.resolved.anchor or "")
            self._record(report, item.source, item.link, str(missing), level, external=False)
            return
        try:
            check_page_for_anchor(item.resolved.permalink, target_page.html)
        except AnchorNotFound as exc:
            self._record(report, item.source, item.link, str(exc), level, external=False)

    def _check_external(
        self,
        page: PageRecord,
        target: str,
        fetched: Dict[str, Union[str, ExternalLinkError]],
        report: LinkCheckReport,
    ) -> None:
        decision = should_check(target, self.policy, is_external=True)
        if self.fetcher is None or not decision.check:
            report.skipped += 1
            return

        url, has_anchor, _ = target.partition("#")
        if url not in fetched:
            report.checked += 1
            self.logger.debug("Fetching %s", url)
            try:
                fetched[url] = self.fetcher(url)
            except ExternalLinkError as exc:
                fetched[url] = exc
        body = fetched[url]
        if isinstance(body, ExternalLinkError):
            self._record(report, page.path, target, str(body), decision.level, external=True)
            return
        if not has_anchor:
            return
        if not should_check_anchor(target, self.policy):
            self.logger.debug("Skipping anchor check for %s", target)
            return

        report.anchors_checked += 1
        try:
            check_page_for_anchor(target, body)
        except AnchorNotFound as exc:
            self._record(report, page.path, target, str(exc), decision.level, external=True)

    def _anchor_exempt(self, link: str, permalink: str) -> bool:
        return not (should_check_anchor(link, self.policy) and should_check_anchor(permalink, self.policy))

    def _record(
        self,
        report: LinkCheckReport,
        source: str,
        link: str,
        message: str,
        level: LinkCheckerLevel,
        *,
        external: bool,
    ) -> None:
        issue = LinkIssue(source=source, link=link, message=message, level=level, external=external)
        report.issues.append(issue)
        if level is LinkCheckerLevel.ERROR:
            self.logger.error("%s", issue.format())
        else:
            self.logger.warning("%s", issue.format())


__all__ = ["Fetcher", "LinkCheckRunner"]

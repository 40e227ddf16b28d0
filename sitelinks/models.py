"""Core data models shared across sitelinks components."""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import LinkCheckerLevel


@dataclass(frozen=True)
class ResolvedInternalLink:
    """Result of a successful resolution of an internal link."""

    # Absolute URL of the target, with the anchor appended when present.
    permalink: str
    # Path to the content file, without the leading ``@/``.
    md_path: str
    # Can only be verified once every page has been rendered.
    anchor: Optional[str] = None


@dataclass(frozen=True)
class CheckDecision:
    """Whether a link gets checked, and how hard a failure hits."""

    check: bool
    level: LinkCheckerLevel

    @property
    def aborts(self) -> bool:
        return self.level is LinkCheckerLevel.ERROR


@dataclass
class LinkIssue:
    """A single failed link or anchor check."""

    source: str
    link: str
    message: str
    level: LinkCheckerLevel
    external: bool = False

    def format(self) -> str:
        return f"{self.level.log_prefix}{self.message} (in {self.source}: {self.link})"


@dataclass
class LinkCheckReport:
    """Outcome of a link check run over a whole site."""

    issues: List[LinkIssue] = field(default_factory=list)
    checked: int = 0
    skipped: int = 0
    anchors_checked: int = 0

    @property
    def errors(self) -> List[LinkIssue]:
        return [issue for issue in self.issues if issue.level is LinkCheckerLevel.ERROR]

    @property
    def warnings(self) -> List[LinkIssue]:
        return [issue for issue in self.issues if issue.level is LinkCheckerLevel.WARN]

    @property
    def failed(self) -> bool:
        return bool(self.errors)

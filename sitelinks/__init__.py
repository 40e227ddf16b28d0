"""Link integrity checks for static-site builds."""

from .analytics import get_reading_analytics
from .config import ConfigError, LinkChecker, LinkCheckerLevel, SiteConfig, load_config
from .links import (
    AnchorNotFound,
    ExternalLinkError,
    LinkError,
    LinkNotFound,
    check_page_for_anchor,
    resolve_internal_link,
)
from .models import CheckDecision, LinkCheckReport, LinkIssue, ResolvedInternalLink
from .policy import should_check, should_check_anchor

__all__ = [
    "AnchorNotFound",
    "CheckDecision",
    "ConfigError",
    "ExternalLinkError",
    "LinkCheckReport",
    "LinkChecker",
    "LinkCheckerLevel",
    "LinkError",
    "LinkIssue",
    "LinkNotFound",
    "ResolvedInternalLink",
    "SiteConfig",
    "check_page_for_anchor",
    "get_reading_analytics",
    "load_config",
    "resolve_internal_link",
    "should_check",
    "should_check_anchor",
]

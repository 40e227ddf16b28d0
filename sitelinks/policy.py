"""Skip-list and severity decisions for link checks."""

from __future__ import annotations

from .config import LinkChecker, LinkCheckerLevel
from .models import CheckDecision


def level_for(policy: LinkChecker, is_external: bool) -> LinkCheckerLevel:
    return policy.external_level if is_external else policy.internal_level


def should_check(url: str, policy: LinkChecker, is_external: bool) -> CheckDecision:
    """Decide whether ``url`` is checked for existence and at which severity."""
    exempt = any(url.startswith(prefix) for prefix in policy.skip_prefixes)
    return CheckDecision(check=not exempt, level=level_for(policy, is_external))


def should_check_anchor(url: str, policy: LinkChecker) -> bool:
    return not any(url.startswith(prefix) for prefix in policy.skip_anchor_prefixes)


__all__ = ["level_for", "should_check", "should_check_anchor"]

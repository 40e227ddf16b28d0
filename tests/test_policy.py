"""Tests for sitelinks.policy."""

from __future__ import annotations

from sitelinks.config import LinkChecker, LinkCheckerLevel
from sitelinks.policy import level_for, should_check, should_check_anchor

POLICY = LinkChecker(
    skip_prefixes=("https://skip.example.com/",),
    skip_anchor_prefixes=("https://github.com/",),
    internal_level=LinkCheckerLevel.WARN,
    external_level=LinkCheckerLevel.ERROR,
)


def test_should_check_skips_matching_prefix() -> None:
    decision = should_check("https://skip.example.com/page", POLICY, is_external=True)

    assert decision.check is False


def test_should_check_skips_exact_prefix() -> None:
    assert should_check("https://skip.example.com/", POLICY, is_external=True).check is False


def test_should_check_anchor_only_prefix_still_checks_existence() -> None:
    url = "https://github.com/getzola/zola#readme"

    assert should_check(url, POLICY, is_external=True).check is True
    assert should_check_anchor(url, POLICY) is False


def test_should_check_anchor_ignores_existence_skip_list() -> None:
    assert should_check_anchor("https://skip.example.com/page#x", POLICY) is True


def test_should_check_uses_level_per_link_kind() -> None:
    internal = should_check("@/about.md", POLICY, is_external=False)
    external = should_check("https://example.com/", POLICY, is_external=True)

    assert internal.check and internal.level is LinkCheckerLevel.WARN
    assert internal.aborts is False
    assert external.level is LinkCheckerLevel.ERROR
    assert external.aborts is True


def test_level_for_defaults_to_error() -> None:
    policy = LinkChecker()

    assert level_for(policy, is_external=False) is LinkCheckerLevel.ERROR
    assert level_for(policy, is_external=True) is LinkCheckerLevel.ERROR

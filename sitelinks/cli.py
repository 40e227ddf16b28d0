"""CLI entrypoints for sitelinks commands."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from .analytics import get_reading_analytics
from .config import ConfigError, LinkCheckerLevel, load_config
from .logging import configure_logging
from .manifest import ManifestError, load_manifest
from .orchestrator import LinkCheckRunner


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitelinks",
        description="Verify internal links and anchors of a built static site.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write detailed logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Check internal links and anchors listed in a site manifest.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    check_parser.add_argument(
        "manifest",
        help="Path to the JSON manifest written by the site build.",
    )
    check_parser.add_argument(
        "--config",
        default=".",
        help="Site configuration file or directory (defaults to current directory).",
    )
    check_parser.add_argument(
        "--warn-only",
        action="store_true",
        help="Report every broken link as a warning for this run.",
    )

    stats_parser = subparsers.add_parser(
        "stats",
        help="Print word count and reading time of a content file.",
    )
    _add_verbose_option(stats_parser, suppress_default=True)
    stats_parser.add_argument("path", help="Content file to measure.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for sitelinks commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "check":
        try:
            config = load_config(Path(args.config))
            manifest = load_manifest(Path(args.manifest))
        except (ConfigError, ManifestError) as exc:
            parser.exit(1, f"{exc}\n")
        policy = config.link_checker
        if args.warn_only:
            policy = dataclasses.replace(
                policy,
                internal_level=LinkCheckerLevel.WARN,
                external_level=LinkCheckerLevel.WARN,
            )
        report = LinkCheckRunner(policy).run(manifest)
        summary = (
            f"{report.checked} link(s) checked, {report.anchors_checked} anchor(s), "
            f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
        )
        if report.failed:
            parser.exit(1, f"Link check failed: {summary}\n")
        print(f"Link check passed: {summary}")
    elif args.command == "stats":
        path = Path(args.path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            parser.exit(1, f"Cannot read {path}: {exc}\n")
        word_count, reading_time = get_reading_analytics(text)
        print(f"{path}: {word_count} words, {reading_time} min read")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])

"""Configuration loading for sitelinks (sitelinks.yml / sitelinks.toml)."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple

import yaml

_CONFIG_NAMES = ("sitelinks.yml", "sitelinks.yaml", "sitelinks.toml")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


class LinkCheckerLevel(str, Enum):
    """Severity applied to a broken link: abort the run or just report it."""

    ERROR = "error"
    WARN = "warn"

    def __str__(self) -> str:
        return self.value

    @property
    def log_prefix(self) -> str:
        if self is LinkCheckerLevel.ERROR:
            return "Error: "
        return "Warning: "

    @classmethod
    def parse(cls, value: Any) -> "LinkCheckerLevel":
        if value is None:
            return cls.ERROR
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for level in cls:
                if level.value == lowered:
                    return level
        raise ConfigError(f"Invalid link checker level {value!r}; expected 'error' or 'warn'")


@dataclass(frozen=True)
class LinkChecker:
    """Link checking policy from the ``link_checker`` table."""

    # Skip link checking for these URL prefixes.
    skip_prefixes: Tuple[str, ...] = ()
    # Skip anchor checking for these URL prefixes.
    skip_anchor_prefixes: Tuple[str, ...] = ()
    internal_level: LinkCheckerLevel = LinkCheckerLevel.ERROR
    external_level: LinkCheckerLevel = LinkCheckerLevel.ERROR

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "LinkChecker":
        return cls(
            skip_prefixes=tuple(_as_str_list(data.get("skip_prefixes"))),
            skip_anchor_prefixes=tuple(_as_str_list(data.get("skip_anchor_prefixes"))),
            internal_level=LinkCheckerLevel.parse(data.get("internal_level")),
            external_level=LinkCheckerLevel.parse(data.get("external_level")),
        )

    def to_mapping(self) -> Dict[str, Any]:
        return {
            "skip_prefixes": list(self.skip_prefixes),
            "skip_anchor_prefixes": list(self.skip_anchor_prefixes),
            "internal_level": str(self.internal_level),
            "external_level": str(self.external_level),
        }


@dataclass
class SiteConfig:
    """Represents the settings defined in the site configuration file."""

    root: Path
    link_checker: LinkChecker = field(default_factory=LinkChecker)


def load_config(config_path: Path) -> SiteConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SiteConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    link_checker_data = data.get("link_checker")
    if link_checker_data is not None and not isinstance(link_checker_data, dict):
        raise ConfigError("link_checker must be a mapping")

    return SiteConfig(
        root=root,
        link_checker=LinkChecker.from_mapping(link_checker_data or {}),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        for name in _CONFIG_NAMES:
            candidate = config_path / name
            if candidate.exists():
                return candidate.resolve()
        return (config_path / _CONFIG_NAMES[0]).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    if path.suffix == ".toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    raise ConfigError(f"Expected a list of strings, got {type(value).__name__}")


__all__ = ["ConfigError", "LinkChecker", "LinkCheckerLevel", "SiteConfig", "load_config"]

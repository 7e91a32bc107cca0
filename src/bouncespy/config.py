"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .spam import SPAM_SCORE_HEADER

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BOUNCESPY_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/bouncespy/config.yaml")
DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS: Mapping[str, int] = MappingProxyType(
    {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
)


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    debug_file: bool = False

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.level}")

    @property
    def level_number(self) -> int:
        return LOG_LEVELS[self.level]


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    root_dir: Path | None = None
    spam_score_header: str = SPAM_SCORE_HEADER
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load and validate configuration from YAML.

    A path given explicitly or through ``$BOUNCESPY_CONFIG`` must exist; a
    missing default file yields the built-in defaults.
    """

    config_path, explicit = _resolve_config_path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        LOGGER.debug("No config file at %s; using defaults.", config_path)
        return Config()

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return _parse_config(raw)


def _resolve_config_path(explicit: Path | str | None) -> tuple[Path, bool]:
    if explicit:
        return Path(explicit).expanduser(), True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True
    return DEFAULT_CONFIG_PATH.expanduser(), False


def _parse_config(raw: dict[str, Any]) -> Config:
    root_value = raw.get("rootdir") or raw.get("root_dir")
    root_dir = Path(root_value).expanduser() if root_value else None
    return Config(
        root_dir=root_dir,
        spam_score_header=_parse_header_name(raw.get("spam_score_header")),
        logging=_parse_logging(raw.get("logging")),
    )


def _parse_header_name(value: Any) -> str:
    if value is None:
        return SPAM_SCORE_HEADER
    if not isinstance(value, str):
        raise ConfigError("spam_score_header must be a string.")
    name = value.strip()
    if not name:
        raise ConfigError("spam_score_header cannot be empty.")
    if ":" in name or any(char.isspace() for char in name):
        raise ConfigError(f"spam_score_header is not a valid header name: {value!r}")
    return name


def _parse_logging(value: Any) -> LoggingConfig:
    if value is None:
        return LoggingConfig()
    if not isinstance(value, dict):
        raise ConfigError("logging must be a mapping.")
    level = str(value.get("level", DEFAULT_LOG_LEVEL)).strip().lower()
    debug_file = bool(value.get("debug_file", False))
    return LoggingConfig(level=level, debug_file=debug_file)


__all__ = [
    "Config",
    "LoggingConfig",
    "LOG_LEVELS",
    "ConfigError",
    "CONFIG_ENV_VAR",
    "load_config",
]

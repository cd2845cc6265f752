"""Runtime configuration sourced from environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMATS: tuple[str, ...] = ("text", "json")
LOG_LEVELS: tuple[str, ...] = tuple(logging.getLevelNamesMapping())


def _choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


def _optional(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


@dataclass(frozen=True, slots=True)
class BboxConfig:
    """Immutable runtime configuration."""

    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override; unknown names give ``default``."""
    value = os.getenv("BBOX_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    name = value.strip().upper()
    return name if name in LOG_LEVELS else default


def load_config() -> BboxConfig:
    """Load immutable configuration from env vars."""
    return BboxConfig(
        log_level=resolve_log_level_name(),
        log_format=_choice("BBOX_LOG_FORMAT", LOG_FORMATS, "text"),
        log_file=_optional("BBOX_LOG_FILE"),
    )

"""Environment-driven settings for the command-line interface."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _get_env(name: str, default: str | None = None) -> str | None:
    """Fetch an environment variable returning the default when unset or empty."""
    value = os.environ.get(name)
    if value is None:
        return default
    trimmed = value.strip()
    return trimmed if trimmed else default


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid FIND_CARGO_TOML_LOG_LEVEL value: {raw!r}")
    return level


@dataclass(frozen=True, slots=True)
class CliSettings:
    """Resolved configuration for the ``find-cargo-toml`` command."""

    log_level: int
    default_boundary: Path | None


@lru_cache
def get_cli_settings() -> CliSettings:
    """Return memoized CLI settings."""
    log_level = _parse_log_level(_get_env("FIND_CARGO_TOML_LOG_LEVEL", "WARNING") or "WARNING")
    boundary_raw = _get_env("FIND_CARGO_TOML_BOUNDARY")
    boundary = Path(boundary_raw) if boundary_raw else None
    return CliSettings(log_level=log_level, default_boundary=boundary)

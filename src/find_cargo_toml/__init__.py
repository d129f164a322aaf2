"""Locate ``Cargo.toml`` manifests by walking up the directory tree."""

from __future__ import annotations

from importlib import metadata

from .exceptions import FindCargoTomlError, ResolutionError
from .finder import (
    MANIFEST_FILENAME,
    find,
    find_from_current_dir,
    iter_manifests,
    normalize_directory,
)
from .options import SearchOptions

__all__ = (
    "__version__",
    "MANIFEST_FILENAME",
    "FindCargoTomlError",
    "ResolutionError",
    "SearchOptions",
    "find",
    "find_from_current_dir",
    "iter_manifests",
    "normalize_directory",
)


def _detect_version() -> str:
    """Return the installed package version or a placeholder during development."""
    try:
        return metadata.version("find-cargo-toml")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _detect_version()

"""Upward search for ``Cargo.toml`` manifests.

The walk starts at a normalized directory and inspects it and each of its
ancestors in turn, yielding the manifest path wherever one exists. It stops
at the first of: the result limit being reached, the boundary directory
having been inspected, or the filesystem root.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Any, Iterator

from .exceptions import ResolutionError
from .options import SearchOptions

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "Cargo.toml"


def normalize_directory(path: Any, *, base: Any = None) -> Path:
    """
    Normalize a path-like value to an absolute, symlink-resolved directory.

    Args:
        path: Path to normalize (absolute, or relative to ``base``).
        base: Directory for relative paths; defaults to the current directory.

    Returns:
        The resolved path, or its parent when it names an existing file.

    Raises:
        ResolutionError: If the path cannot be resolved or inspected.
    """
    try:
        candidate = Path(os.fsdecode(path))
        if not candidate.is_absolute():
            root = Path(os.fsdecode(base)) if base is not None else Path.cwd()
            candidate = root / candidate
        resolved = candidate.resolve(strict=False)
        if resolved.is_file():
            resolved = resolved.parent
    except (OSError, ValueError, TypeError, RuntimeError) as exc:
        raise ResolutionError(path, str(exc)) from exc
    return resolved


def _is_regular_file(path: Path) -> bool:
    """Return True when ``path`` is a regular file, following symlinks.

    Missing paths return False; other ``OSError``s propagate.
    """
    try:
        mode = os.stat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return False
    return stat.S_ISREG(mode)


def _walk(start: Path, stop: Path | None, limit: int | None) -> Iterator[Path]:
    if limit == 0:
        return

    found = 0
    current = start
    while True:
        candidate = current / MANIFEST_FILENAME
        try:
            matched = _is_regular_file(candidate)
        except OSError as exc:
            logger.debug("Skipping %s: %s (errno %s)", current, exc.strerror, exc.errno)
            matched = False

        if matched:
            found += 1
            logger.debug("Found manifest %s", candidate)
            yield candidate

        if limit is not None and found >= limit:
            return
        if stop is not None and current == stop:
            logger.debug("Reached boundary %s", stop)
            return

        parent = current.parent
        if parent == current:
            return
        current = parent


def iter_manifests(start: Any, options: SearchOptions | None = None) -> Iterator[Path]:
    """
    Iterate over manifest paths from ``start`` upward, nearest first.

    Both ``start`` and ``options.boundary`` are normalized before this
    function returns, so a :class:`ResolutionError` is raised here rather
    than on the first ``next()``.

    Args:
        start: File or directory to begin the search from.
        options: Boundary, limit and base directory; all optional.

    Returns:
        Iterator yielding absolute paths to existing ``Cargo.toml`` files.
    """
    opts = options or SearchOptions()
    current = normalize_directory(start, base=opts.base)
    stop = None
    if opts.boundary is not None:
        stop = normalize_directory(opts.boundary, base=opts.base)
    logger.debug(
        "Searching for %s from %s (boundary=%s, limit=%s)",
        MANIFEST_FILENAME,
        current,
        stop,
        opts.limit,
    )
    return _walk(current, stop, opts.limit)


def find(
    start: Any,
    boundary: Any = None,
    limit: int | None = None,
    *,
    base: Any = None,
) -> list[Path]:
    """
    Find every ``Cargo.toml`` between ``start`` and ``boundary`` (or the root).

    Args:
        start: File or directory to begin the search from.
        boundary: Furthest ancestor directory to inspect, inclusive.
        limit: Maximum number of results. ``0`` returns an empty list.
        base: Directory relative paths are resolved against.

    Returns:
        Manifest paths ordered from nearest to furthest.

    Raises:
        ResolutionError: If ``start``, ``boundary`` or ``base`` cannot be normalized.
        pydantic.ValidationError: If ``limit`` is negative.
    """
    options = SearchOptions(boundary=boundary, limit=limit, base=base)
    return list(iter_manifests(start, options))


def find_from_current_dir(start: Any = ".", *, limit: int | None = None) -> list[Path]:
    """Shortcut for :func:`find` resolving ``start`` against the current directory."""
    return find(start, limit=limit, base=Path.cwd())

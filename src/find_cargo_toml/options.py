"""Search options shared by the finder entry points."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchOptions(BaseModel):
    """Optional knobs for an upward manifest search.

    ``boundary`` and ``base`` are kept as given (str, bytes or path-like) and
    only normalized when a search runs, so unusable values surface as
    :class:`~find_cargo_toml.exceptions.ResolutionError`.
    ``limit=0`` is valid and yields no results; ``None`` means unbounded.
    """

    model_config = ConfigDict(frozen=True)

    boundary: Any = Field(
        default=None,
        description="Furthest ancestor directory to inspect, inclusive",
    )
    limit: int | None = Field(
        default=None,
        description="Maximum number of manifests to return",
        ge=0,
    )
    base: Any = Field(
        default=None,
        description="Directory relative paths are resolved against (defaults to cwd)",
    )

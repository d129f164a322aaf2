"""Custom exceptions for manifest discovery."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class FindCargoTomlError(RuntimeError):
    """Base exception for manifest discovery failures."""


@dataclass(slots=True)
class ResolutionError(FindCargoTomlError):
    """Raised when a start or boundary path cannot be normalized."""

    path: Any
    reason: str

    def __str__(self) -> str:
        return f"cannot resolve path {self.path!r}: {self.reason}"

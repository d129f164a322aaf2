"""Pytest configuration helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from find_cargo_toml.config import get_cli_settings


@pytest.fixture(autouse=True)
def reset_cli_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give each test a fresh view of FIND_CARGO_TOML_* variables."""
    monkeypatch.delenv("FIND_CARGO_TOML_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FIND_CARGO_TOML_BOUNDARY", raising=False)
    get_cli_settings.cache_clear()
    package_logger = logging.getLogger("find_cargo_toml")
    previous_level = package_logger.level
    try:
        yield
    finally:
        get_cli_settings.cache_clear()
        package_logger.setLevel(previous_level)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Build ``a/Cargo.toml``, ``a/b/Cargo.toml`` and an empty ``a/b/c``.

    Returns the resolved ``tmp_path`` so comparisons survive symlinked temp dirs.
    """
    root = tmp_path.resolve()
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "a" / "Cargo.toml").write_text("[workspace]\n", encoding="utf-8")
    (root / "a" / "b" / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
    return root

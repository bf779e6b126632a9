"""Shared pytest fixtures for itemparser tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from itemparser.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

_SETTINGS_ENV_VARS = (
    "PARSER__WRAP_FALLBACK",
    "PARSER__TRIM_LINES",
    "APP__LOG_LEVEL",
    "APP__LOG_DIR",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test against default settings, unaffected by the shell env."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

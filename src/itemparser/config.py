"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/itemparser/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

WrapFallback = Literal["trailing_gap", "first_delimiter", "fail"]

_LOG_LEVELS = frozenset(("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"))


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class ParserConfig(BaseModel):
    """Auto-fill behaviour.

    ``wrap_fallback`` decides the wrap-around delimiter when no example pair
    has the last-to-first role transition:

    - ``trailing_gap``: whitespace/newline run after the last example, then
      the ``first_delimiter`` chain
    - ``first_delimiter``: first derived delimiter, then an empty one
    - ``fail``: reject the auto-fill

    The default inserts the ``trailing_gap`` step ahead of the older
    first-delimiter-then-empty chain. With a single title and body example
    the first delimiter is the title->body separator, so reusing it makes
    each body run into the next title. Set ``first_delimiter`` to get the
    older chain back.
    """

    wrap_fallback: WrapFallback = "trailing_gap"
    trim_lines: bool = True


class AppConfig(BaseModel):
    """Logging configuration for the CLI."""

    log_level: str = "INFO"
    log_dir: Path | None = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            msg = f"APP__LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``PARSER__WRAP_FALLBACK``, ``PARSER__TRIM_LINES``, ``APP__LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    parser: ParserConfig = ParserConfig()
    app: AppConfig = AppConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings

"""Tests for itemparser.config -- Settings, sub-models, env var nesting.

Every test constructs Settings(_env_file=None, ...) to avoid reading real .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from itemparser import setup_logging
from itemparser.config import AppConfig, ParserConfig, Settings, get_settings


class TestDefaults:
    """Settings with no environment fall back to documented defaults."""

    def test_parser_defaults(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.parser.wrap_fallback == "trailing_gap"
        assert s.parser.trim_lines is True

    def test_app_defaults(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.app.log_level == "INFO"
        assert s.app.log_dir is None


class TestValidation:
    """Pydantic validation on construction."""

    def test_explicit_sub_models(self) -> None:
        s = Settings(
            _env_file=None,  # type: ignore[call-arg]
            parser=ParserConfig(wrap_fallback="fail", trim_lines=False),
            app=AppConfig(log_level="warning"),
        )
        assert s.parser.wrap_fallback == "fail"
        assert s.parser.trim_lines is False
        assert s.app.log_level == "WARNING"

    def test_unknown_wrap_fallback_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ParserConfig(wrap_fallback="guess")  # type: ignore[arg-type]

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="APP__LOG_LEVEL"):
            AppConfig(log_level="LOUD")


class TestEnvVars:
    """Double-underscore env vars populate nested models."""

    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSER__WRAP_FALLBACK", "first_delimiter")
        monkeypatch.setenv("PARSER__TRIM_LINES", "0")
        monkeypatch.setenv("APP__LOG_LEVEL", "debug")

        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.parser.wrap_fallback == "first_delimiter"
        assert s.parser.trim_lines is False
        assert s.app.log_level == "DEBUG"

    def test_invalid_env_var_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSER__WRAP_FALLBACK", "sometimes")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]


class TestGetSettings:
    """get_settings() caches one instance."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert get_settings().parser.wrap_fallback == "trailing_gap"
        monkeypatch.setenv("PARSER__WRAP_FALLBACK", "fail")
        get_settings.cache_clear()
        assert get_settings().parser.wrap_fallback == "fail"


class TestSetupLogging:
    """setup_logging() attaches console and rotating file handlers."""

    def test_file_handler_created(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("APP__LOG_DIR", str(log_dir))
        get_settings.cache_clear()

        root = logging.getLogger()
        before = list(root.handlers)
        previous_level = root.level
        try:
            setup_logging()
            logging.getLogger("itemparser.test").debug("written to file")
            added = [h for h in root.handlers if h not in before]
            assert len(added) == 2
            for handler in added:
                handler.flush()
        finally:
            for handler in [h for h in root.handlers if h not in before]:
                root.removeHandler(handler)
                handler.close()
            root.setLevel(previous_level)

        log_file = log_dir / "itemparser.log"
        assert log_file.is_file()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        """Calling setup_logging() again replaces its console handler."""
        root = logging.getLogger()
        before = list(root.handlers)
        previous_level = root.level
        try:
            setup_logging()
            setup_logging("DEBUG")
            added = [h for h in root.handlers if h not in before]
            assert len(added) == 1
            assert added[0].level == logging.DEBUG
        finally:
            for handler in [h for h in root.handlers if h not in before]:
                root.removeHandler(handler)
                handler.close()
            root.setLevel(previous_level)

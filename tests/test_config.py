"""Tests for runtime configuration and logging setup."""

import json
import logging
import logging.handlers
from pathlib import Path

import pytest

from proctop.config import DEBUG_ENV, DEFAULT_ROWS, LOG_FILE_ENV, Config
from proctop.logging import LOGGER_NAME, configure, ensure_configured, get_logger


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        """Defaults match the dashboard's cadence and layout."""
        config = Config()
        assert config.rows == DEFAULT_ROWS
        assert config.tick_interval == 0.5
        assert config.message_ttl == 3.0
        assert config.log_path is None
        assert config.debug is False

    def test_rows_must_be_positive(self):
        """A table with no rows is rejected."""
        with pytest.raises(ValueError, match="rows"):
            Config(rows=0)

    def test_from_env(self, monkeypatch, tmp_path: Path):
        """Environment variables supply the log file and debug flag."""
        monkeypatch.setenv(LOG_FILE_ENV, str(tmp_path / "proctop.log"))
        monkeypatch.setenv(DEBUG_ENV, "1")

        config = Config.from_env(rows=25)

        assert config.rows == 25
        assert config.log_path == tmp_path / "proctop.log"
        assert config.debug is True

    def test_from_env_without_variables(self, monkeypatch):
        """With a clean environment logging stays off."""
        monkeypatch.delenv(LOG_FILE_ENV, raising=False)
        monkeypatch.delenv(DEBUG_ENV, raising=False)

        config = Config.from_env()

        assert config.rows == DEFAULT_ROWS
        assert config.log_path is None
        assert config.debug is False


class TestLogging:
    """Tests for structlog configuration."""

    def test_ensure_configured_keeps_existing_setup(self, tmp_path: Path):
        """An already configured log file is not replaced."""
        configure(Config(log_path=tmp_path / "proctop.log"))
        ensure_configured(Config())
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert isinstance(handlers[0], logging.handlers.RotatingFileHandler)

    def test_null_handler_without_log_path(self):
        """No log file means no output anywhere."""
        configure(Config())
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_writes_json_lines(self, tmp_path: Path):
        """Events land in the log file as JSON."""
        log_path = tmp_path / "logs" / "proctop.log"
        configure(Config(log_path=log_path))

        get_logger("proctop.test").info("tick_skipped", error="boom")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()

        record = json.loads(log_path.read_text().strip().splitlines()[-1])
        assert record["event"] == "tick_skipped"
        assert record["error"] == "boom"
        assert record["level"] == "info"

    def test_debug_level(self, tmp_path: Path):
        """The debug flag lowers the threshold."""
        configure(Config(log_path=tmp_path / "proctop.log", debug=True))
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

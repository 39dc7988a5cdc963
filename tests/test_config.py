"""
Tests for settings and logger setup.
"""
import logging
import logging.handlers

import pytest
from pydantic import ValidationError
from primkit.core.config import Settings, settings
from primkit.core.logging_config import setup_logger


def _close_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        monkeypatch.delenv("PRIMKIT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("PRIMKIT_LOG_DIR", raising=False)
        monkeypatch.delenv("PRIMKIT_TIMEZONE", raising=False)

        config = Settings(_env_file=None)
        assert config.LOG_LEVEL == "WARNING"
        assert config.LOG_DIR is None
        assert config.TIMEZONE is None
        assert config.LOG_BACKUP_COUNT == 5

    def test_env_prefix(self, monkeypatch):
        """Test PRIMKIT_* variables are read."""
        monkeypatch.setenv("PRIMKIT_LOG_LEVEL", "error")
        monkeypatch.setenv("PRIMKIT_TIMEZONE", "America/New_York")

        config = Settings(_env_file=None)
        assert config.LOG_LEVEL == "ERROR"
        assert config.TIMEZONE == "America/New_York"

    def test_log_level_normalized(self):
        """Test log levels are uppercased."""
        assert Settings(LOG_LEVEL=" debug ", _env_file=None).LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        """Test invalid log levels are rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(LOG_LEVEL="loud", _env_file=None)


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_only_by_default(self, monkeypatch):
        """Test a single console handler without LOG_DIR."""
        monkeypatch.setattr(settings, "LOG_DIR", None)
        logger = setup_logger("primkit.tests.console", level="DEBUG")
        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0], logging.StreamHandler)
            assert logger.propagate is False
        finally:
            _close_handlers(logger)

    def test_handlers_added_once(self, monkeypatch):
        """Test repeated setup does not duplicate handlers."""
        monkeypatch.setattr(settings, "LOG_DIR", None)
        logger = setup_logger("primkit.tests.repeat")
        try:
            setup_logger("primkit.tests.repeat")
            assert len(logger.handlers) == 1
        finally:
            _close_handlers(logger)

    def test_level_override_any_case(self, monkeypatch):
        """Test a lowercase override is normalized like PRIMKIT_LOG_LEVEL."""
        monkeypatch.setattr(settings, "LOG_DIR", None)
        logger = setup_logger("primkit.tests.override", level=" info ")
        try:
            assert logger.level == logging.INFO
            assert logger.handlers[0].level == logging.INFO

            setup_logger("primkit.tests.override", level="error")
            assert logger.level == logging.ERROR
            assert logger.handlers[0].level == logging.ERROR
        finally:
            _close_handlers(logger)

    def test_level_from_settings(self, monkeypatch):
        """Test the configured level applies when no override is given."""
        monkeypatch.setattr(settings, "LOG_DIR", None)
        monkeypatch.setattr(settings, "LOG_LEVEL", "CRITICAL")
        logger = setup_logger("primkit.tests.configured")
        try:
            assert logger.level == logging.CRITICAL
        finally:
            _close_handlers(logger)

    def test_unknown_level_override(self):
        """Test an unknown override fails before any handler is attached."""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logger("primkit.tests.unknown", level="loud")
        assert logging.getLogger("primkit.tests.unknown").handlers == []

    def test_rotating_file_handler(self, monkeypatch, tmp_path):
        """Test LOG_DIR adds a rotating file handler."""
        log_dir = tmp_path / "logs"
        monkeypatch.setattr(settings, "LOG_DIR", str(log_dir))
        logger = setup_logger("primkit.tests.file", level="INFO")
        try:
            file_handlers = [
                h for h in logger.handlers
                if isinstance(h, logging.handlers.RotatingFileHandler)
            ]
            assert len(file_handlers) == 1

            logger.info("hello")
            file_handlers[0].flush()

            log_file = log_dir / "primkit_tests_file.log"
            assert log_file.exists()
            assert "hello" in log_file.read_text()
        finally:
            _close_handlers(logger)

"""Tests for logging setup."""

import logging

import pytest

from core.utils.logging import get_logger, setup_logging


class TestLogging:
    """Tests for setup_logging and get_logger."""

    def test_get_logger_is_named(self):
        assert get_logger("core.config.embedded") is logging.getLogger("core.config.embedded")

    def test_module_loggers_come_from_get_logger(self):
        from core.config import embedded

        assert embedded.logger.name == "core.config.embedded"

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        root = setup_logging()

        assert root.level == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        root = setup_logging(level="error")

        assert root.level == logging.ERROR

    def test_unknown_format_raises(self):
        with pytest.raises(ValueError):
            setup_logging(format_style="xml")

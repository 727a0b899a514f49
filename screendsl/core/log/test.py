"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import _level_from_environment, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "screendsl"

    @pytest.mark.unit
    def test_module_loggers_are_children(self) -> None:
        """Module loggers propagate into the package logger."""
        package = get_logger()
        logger = get_logger("screendsl.dispatch.lib")
        assert logger.parent is package

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once the root logger has handlers,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET


class TestLevelFromEnvironment:
    """Tests for the SCREENDSL_LOG_LEVEL lookup."""

    @pytest.mark.unit
    def test_default_is_warning(self, monkeypatch):
        monkeypatch.delenv("SCREENDSL_LOG_LEVEL", raising=False)
        assert _level_from_environment() == logging.WARNING

    @pytest.mark.unit
    def test_reads_named_level(self, monkeypatch):
        monkeypatch.setenv("SCREENDSL_LOG_LEVEL", "debug")
        assert _level_from_environment() == logging.DEBUG

    @pytest.mark.unit
    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("SCREENDSL_LOG_LEVEL", "chatty")
        assert _level_from_environment() == logging.WARNING

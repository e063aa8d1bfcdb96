"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, parse_level, setup_logging


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
        assert logger.name == "formforge"

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """setup_logging takes level names as well as numbers."""
        stream = StringIO()
        setup_logging(level="debug", stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once logging is configured, so only the
        # API contract is checked here.
        assert logger.level == logging.NOTSET


class TestParseLevel:
    """Tests for level name resolution."""

    @pytest.mark.unit
    def test_names(self) -> None:
        assert parse_level("debug") == logging.DEBUG
        assert parse_level(" WARNING ") == logging.WARNING

    @pytest.mark.unit
    def test_numbers_pass_through(self) -> None:
        assert parse_level(logging.ERROR) == logging.ERROR

    @pytest.mark.unit
    def test_unknown_name_falls_back_to_info(self) -> None:
        assert parse_level("chatty") == logging.INFO

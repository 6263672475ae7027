"""Tests for the filedatacache logging helpers."""

import logging

import pytest

from filedatacache.utils import (
    disable_logging,
    enable_logging,
    get_logger,
    set_log_level,
    setup_logger,
)
from filedatacache.utils.logging import ColoredFormatter


@pytest.fixture
def logger_name(request):
    """A fresh logger name per test, removed afterwards."""
    name = f"filedatacache.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestSetupLogger:
    """setup_logger wires handlers once."""

    def test_default_logger_is_configured(self):
        logger = get_logger()

        assert logger.name == "filedatacache"
        assert logger.handlers
        assert logger.propagate is False

    def test_no_duplicate_handlers(self, logger_name):
        first = setup_logger(logger_name)
        second = setup_logger(logger_name)

        assert first is second
        assert len(second.handlers) == 1

    def test_string_level(self, logger_name):
        logger = setup_logger(logger_name, level="debug")

        assert logger.level == logging.DEBUG

    def test_file_handler(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "cache.log"
        logger = setup_logger(logger_name, console=False, log_file=log_file)

        logger.warning("Failed to load file: app.json")
        for handler in logger.handlers:
            handler.flush()

        assert "Failed to load file: app.json" in log_file.read_text(encoding="utf-8")


class TestLevels:
    """Level changes apply to the logger and its handlers."""

    def test_set_log_level(self, logger_name):
        logger = setup_logger(logger_name)
        set_log_level("ERROR", logger_name)

        assert logger.level == logging.ERROR
        assert all(h.level == logging.ERROR for h in logger.handlers)

    def test_disable_and_enable(self, logger_name):
        logger = setup_logger(logger_name)

        disable_logging(logger_name)
        assert not logger.isEnabledFor(logging.CRITICAL)

        enable_logging(logger_name, logging.WARNING)
        assert logger.isEnabledFor(logging.WARNING)
        assert not logger.isEnabledFor(logging.INFO)


class TestColoredFormatter:
    """Colors are only added when requested and supported."""

    def test_plain_when_disabled(self):
        formatter = ColoredFormatter("%(levelname)s %(message)s", use_colors=False)
        record = logging.makeLogRecord({"levelno": logging.WARNING, "levelname": "WARNING", "msg": "x"})

        assert formatter.format(record) == "WARNING x"

    def test_record_not_mutated(self):
        formatter = ColoredFormatter("%(levelname)s %(message)s")
        formatter.use_colors = True
        record = logging.makeLogRecord({"levelno": logging.INFO, "levelname": "INFO", "msg": "x"})

        formatted = formatter.format(record)

        assert "\033[" in formatted
        assert record.levelname == "INFO"

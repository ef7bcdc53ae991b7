# tests/utils_tests/test_logger.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Test suite for the shared logger and its formatter

import logging

import pytest
from utils.logger import (
    LogLevel,
    ProptabFormatter,
    configure_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture(autouse=True)
def restore_log_level():
    logger = get_logger()
    previous = logger.level
    yield
    logger.set_level(LogLevel(previous))


class TestProptabLogger:
    """Level handling and record formatting."""

    def test_global_instance(self):
        assert get_logger() is get_logger()

    @pytest.mark.parametrize(
        "verbose, debug, expected",
        [
            (False, False, logging.WARNING),
            (True, False, logging.INFO),
            (False, True, logging.DEBUG),
            (True, True, logging.DEBUG),
        ],
    )
    def test_configure_logging(self, verbose, debug, expected):
        configure_logging(verbose=verbose, debug=debug)
        assert get_logger().level == expected

    def test_set_log_level_updates_handlers(self):
        set_log_level(LogLevel.ERROR)
        logger = get_logger()
        assert all(handler.level == logging.ERROR for handler in logger.logger.handlers)

    @pytest.mark.parametrize(
        "level, expected",
        [
            (logging.DEBUG, "[DEBUG] split at '∧'"),
            (logging.INFO, "split at '∧'"),
            (logging.ERROR, "split at '∧'"),
        ],
    )
    def test_formatter(self, level, expected):
        record = logging.LogRecord("proptab", level, __file__, 1, "split at '∧'", None, None)
        assert ProptabFormatter().format(record) == expected

    def test_parse_emits_debug_records(self, caplog):
        from syntax import parse

        logger = get_logger()
        set_log_level(LogLevel.DEBUG)
        logger.logger.addHandler(caplog.handler)
        try:
            parse("P∧Q")
        finally:
            logger.logger.removeHandler(caplog.handler)

        messages = [record.getMessage() for record in caplog.records]
        assert any("split at '∧'" in message for message in messages)
        assert any(message.startswith("Parsing formula") for message in messages)

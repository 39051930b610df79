"""Test the centralized logging functionality."""

import logging
from io import StringIO

from giftgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    """Info is emitted by default, debug only after enabling it."""
    disable_debug_logging()
    logger = get_logger("giftgraph.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)
        disable_debug_logging()


def test_logger_naming():
    logger = get_logger("giftgraph.model.test")
    assert logger.name == "giftgraph.model.test"
    assert logger.level == logging.NOTSET


def test_multiple_loggers_inherit_global_level():
    logger1 = get_logger("giftgraph.module1")
    logger2 = get_logger("giftgraph.module2")
    assert logger1 is not logger2

    try:
        set_global_log_level(logging.WARNING)
        assert logging.getLogger("giftgraph").level == logging.WARNING
        assert logger1.getEffectiveLevel() == logging.WARNING
        assert logger2.getEffectiveLevel() == logging.WARNING
    finally:
        disable_debug_logging()


def test_reset_logging_allows_custom_handler():
    """After a reset the root logger can be configured with another handler."""
    stream = StringIO()
    custom = logging.StreamHandler(stream)

    reset_logging()
    try:
        setup_root_logger(handler=custom, format_string="%(levelname)s:%(message)s")
        root_logger = logging.getLogger("giftgraph")
        assert root_logger.handlers == [custom]

        get_logger("giftgraph.reset").info("hello")
        assert "INFO:hello" in stream.getvalue()

        # Second setup call is a no-op
        setup_root_logger(handler=logging.StreamHandler(StringIO()))
        assert root_logger.handlers == [custom]
    finally:
        reset_logging()
        setup_root_logger()

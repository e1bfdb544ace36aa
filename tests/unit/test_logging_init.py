from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

import linegroups.logging.init
from linegroups.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    set_debug,
    setup_logging,
)


def _capture(logger: logging.Logger) -> StringIO:
    captured = StringIO()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(captured)
    handler.setLevel(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    return captured


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    logger = logging.getLogger("test_linegroups_labels")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    captured = _capture(logger)

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    assert captured.getvalue().strip().split("\n") == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_module_loggers_propagate_into_application_logger():
    logger = setup_logging()
    captured = _capture(logger)

    logging.getLogger("linegroups.services.orchestrator").warning("from a module")

    assert captured.getvalue() == "WARN from a module\n"


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()


def test_setup_logging_idempotent():
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_set_debug_lowers_logger_and_handlers():
    logger = setup_logging()
    set_debug(logger)
    assert logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger.handlers)


def test_summary_level_registered():
    setup_logging()
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"


def test_log_summary_convenience_function():
    logger = setup_logging()
    captured = _capture(logger)

    log_summary("lines=3 accepted=3 malformed=0 duplicates=0 groups=1 multi_groups=1 singletons=0 elapsed_sec=0.1")

    assert captured.getvalue().strip() == (
        "SUMMARY lines=3 accepted=3 malformed=0 duplicates=0 groups=1 multi_groups=1 singletons=0 elapsed_sec=0.1"
    )


def test_reset_logging_clears_global():
    setup_logging()
    linegroups.logging.init.reset_logging()
    assert linegroups.logging.init._logger is None


def test_logging_when_not_tty():
    with patch("sys.stdout.isatty", return_value=False):
        logger = setup_logging()
        logger.info("Test message when not TTY")
        assert logger.level == logging.INFO

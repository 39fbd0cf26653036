"""
Tests for logging configuration helpers
"""

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from .logging_utils import configureLogger, getLogLevelByStr, initLogging


@pytest.fixture
def restoreLoggers():
    """Restore handlers and levels of the loggers touched by a test."""
    names = ["", "httpx", "httpcore", "google_geocoding", "test.geocoding"]
    saved = {}
    for name in names:
        localLogger = logging.getLogger(name)
        saved[name] = (localLogger.level, localLogger.handlers[:], localLogger.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        localLogger = logging.getLogger(name)
        for handler in localLogger.handlers[:]:
            if handler not in handlers:
                handler.close()
            localLogger.removeHandler(handler)
        for handler in handlers:
            localLogger.addHandler(handler)
        localLogger.setLevel(level)
        localLogger.propagate = propagate


@pytest.mark.parametrize(
    "levelStr, expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("Warning", logging.WARNING), ("ERROR", logging.ERROR)],
)
def test_get_log_level_by_str(levelStr, expected):
    assert getLogLevelByStr(levelStr) == expected


def test_get_log_level_by_str_invalid():
    assert getLogLevelByStr("chatty") is None
    assert getLogLevelByStr("chatty", logging.INFO) == logging.INFO


def test_configure_logger_console(restoreLoggers):
    localLogger = logging.getLogger("test.geocoding")

    configureLogger(localLogger, {"level": "DEBUG", "console": True, "console-level": "ERROR", "propagate": False})

    assert localLogger.level == logging.DEBUG
    assert localLogger.propagate is False
    assert len(localLogger.handlers) == 1
    assert isinstance(localLogger.handlers[0], logging.StreamHandler)
    assert localLogger.handlers[0].level == logging.ERROR


def test_configure_logger_twice_does_not_duplicate(restoreLoggers):
    localLogger = logging.getLogger("test.geocoding")

    configureLogger(localLogger, {"console": True})
    configureLogger(localLogger, {"console": True})

    assert len(localLogger.handlers) == 1


def test_configure_logger_file(restoreLoggers, tmp_path):
    localLogger = logging.getLogger("test.geocoding")
    logFile = tmp_path / "logs" / "geocoding.log"

    configureLogger(localLogger, {"level": "INFO", "file": str(logFile), "format": "%(levelname)s %(message)s"})
    localLogger.info("hello from the geocoder")
    for handler in localLogger.handlers:
        handler.flush()

    assert logFile.read_text(encoding="utf-8").strip() == "INFO hello from the geocoder"


def test_configure_logger_rotating_file(restoreLoggers, tmp_path):
    localLogger = logging.getLogger("test.geocoding")

    configureLogger(localLogger, {"file": str(tmp_path / "geocoding.log"), "rotate": True, "file-level": "WARNING"})

    assert len(localLogger.handlers) == 1
    assert isinstance(localLogger.handlers[0], TimedRotatingFileHandler)
    assert localLogger.handlers[0].level == logging.WARNING


def test_init_logging_quiets_httpx(restoreLoggers):
    initLogging({"level": "DEBUG", "logger": {"google_geocoding": {"level": "WARNING"}}})

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
    assert logging.getLogger("google_geocoding").level == logging.WARNING

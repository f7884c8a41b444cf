import logging

import pytest

from cardwar.common.log import LOGGER_NAME, configure_logging, resolve_level


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the package logger as we found it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def test_resolve_level_names():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("INFO") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_resolve_level_from_environment(monkeypatch):
    monkeypatch.setenv("CARDWAR_LOG_LEVEL", "error")
    assert resolve_level() == logging.ERROR


def test_resolve_level_default(monkeypatch):
    monkeypatch.delenv("CARDWAR_LOG_LEVEL", raising=False)
    assert resolve_level() == logging.WARNING


def test_resolve_level_rejects_unknown():
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_configure_logging_adds_one_handler():
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = []

    configure_logging("info")
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG

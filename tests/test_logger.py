import logging

import pytest

from chechr.config import TRACE, AppConfig, LogLevel
from chechr.logger import set_up_logger


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)


def test_default_level_is_error():
    root = set_up_logger(AppConfig(port=8080))
    assert root.level == logging.ERROR
    assert root is logging.getLogger()


@pytest.mark.parametrize("level", list(LogLevel))
def test_configured_level(level):
    root = set_up_logger(AppConfig(port=8080, log_level=level))
    assert root.level == level.to_logging_level()


def test_trace_level_has_name():
    root = set_up_logger(AppConfig(port=8080, log_level=LogLevel.TRACE))
    assert root.level == TRACE
    assert root.isEnabledFor(TRACE)
    assert logging.getLevelName(TRACE) == "TRACE"


def test_repeated_set_up_adds_one_handler():
    before = len(logging.getLogger().handlers)
    set_up_logger(AppConfig(port=8080))
    root = set_up_logger(AppConfig(port=8080, log_level=LogLevel.DEBUG))
    assert len(root.handlers) == before + 1
    assert root.level == logging.DEBUG
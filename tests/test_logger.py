import logging
from datetime import datetime, timedelta

import pytest

from abyssal_watcher.logger import init_logger


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)


def test_init_logger_sets_info_level(clean_root):
    handler = init_logger()
    assert handler in clean_root.handlers
    assert clean_root.level == logging.INFO
    assert clean_root.isEnabledFor(logging.DEBUG) is False


def test_init_logger_installs_handler(clean_root):
    handler = init_logger()
    assert handler in clean_root.handlers


def test_init_logger_is_idempotent(clean_root):
    first = init_logger()
    second = init_logger()
    assert first is second
    assert clean_root.handlers.count(first) == 1


def test_format_of_record(clean_root):
    handler = init_logger()
    record = logging.LogRecord("t", logging.WARNING, __file__, 1, "hello %s", ("there",), None)
    line = handler.format(record)
    assert line[0] == "["
    assert line[20:] == " WARNING] hello there"
    stamp = datetime.strptime(line[1:20], "%Y-%m-%d %H:%M:%S")
    assert abs(stamp - datetime.now()) < timedelta(minutes=5)
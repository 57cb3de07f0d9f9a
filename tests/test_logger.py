import logging

import pytest
from rich.logging import RichHandler

from whip.utils.logger import configure_logging, get_logger


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _rich_handlers(root):
    return [h for h in root.handlers if isinstance(h, RichHandler)]


def test_configure_logging_is_idempotent(restore_root):
    configure_logging()
    configure_logging()
    assert len(_rich_handlers(restore_root)) == 1
    assert restore_root.level == logging.INFO


def test_verbose_switches_to_debug(restore_root):
    configure_logging(verbose=True)
    assert restore_root.level == logging.DEBUG
    assert _rich_handlers(restore_root)[0].level == logging.DEBUG

    configure_logging()
    assert restore_root.level == logging.INFO
    assert len(_rich_handlers(restore_root)) == 1


def test_get_logger_level():
    assert get_logger("whip.test.logger", logging.WARNING).level == logging.WARNING

"""Unit tests for logging setup."""
from __future__ import annotations

import logging

import pytest

from snlib.utils import LOGGER_NAME, setup_logging


@pytest.fixture
def statnav_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def test_default_level_is_info(statnav_logger):
    assert setup_logging() is statnav_logger
    assert statnav_logger.level == logging.INFO


def test_verbose_enables_debug_without_file(statnav_logger):
    before = len(statnav_logger.handlers)
    setup_logging(verbose=True)
    assert statnav_logger.level == logging.DEBUG
    assert len(statnav_logger.handlers) == before


def test_debug_adds_file_handler_once(statnav_logger, tmp_path):
    log_file = str(tmp_path / "debug.log")
    before = len(statnav_logger.handlers)
    setup_logging(debug=True, log_file=log_file)
    setup_logging(debug=True, log_file=log_file)
    assert statnav_logger.level == logging.DEBUG
    assert len(statnav_logger.handlers) == before + 1

    statnav_logger.debug("Cursor moved")
    for handler in statnav_logger.handlers:
        handler.flush()
    assert "Cursor moved" in (tmp_path / "debug.log").read_text()

#!/usr/bin/env python3
import logging

import pytest

from debindex.core.log import LOGGER_NAME, configure_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_sets_level_and_single_handler(restore_logger):
    configure_logging("debug")
    configure_logging("INFO")
    ours = [h for h in restore_logger.handlers if getattr(h, "_debindex", False)]
    assert len(ours) == 1
    assert restore_logger.level == logging.INFO


def test_configure_accepts_int(restore_logger):
    configure_logging(logging.ERROR)
    assert restore_logger.level == logging.ERROR


def test_configure_rejects_unknown_level(restore_logger):
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")

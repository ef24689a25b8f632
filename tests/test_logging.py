"""Tests for the package logger setup."""
import logging

import pytest

from vaultkeep.app.core.logging import LOG_FORMAT, configure_logging, logger


@pytest.fixture
def clean_logger():
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_handler_installed_once(clean_logger):
    configure_logging("INFO")
    configure_logging("DEBUG")
    configure_logging("WARNING")

    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.WARNING


def test_handler_uses_package_format(clean_logger):
    configure_logging()

    [handler] = clean_logger.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == LOG_FORMAT


def test_foreign_handlers_are_left_alone(clean_logger):
    other = logging.NullHandler()
    clean_logger.addHandler(other)

    configure_logging()
    configure_logging()

    assert other in clean_logger.handlers
    assert len(clean_logger.handlers) == 2

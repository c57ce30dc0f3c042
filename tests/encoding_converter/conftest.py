"""Shared fixtures for the converter tests."""
import logging

import pytest

from encoding_converter.shared.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers so each test binds a fresh one to its own captured stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_level = logger.level
    logger.handlers.clear()
    yield
    logger.handlers.clear()
    logger.setLevel(saved_level)

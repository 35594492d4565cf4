"""Shared test fixtures for ignite tests."""
import logging

import pytest

from ignite.core import logger as ignite_logger


@pytest.fixture(autouse=True)
def reset_ignite_logging():
    """Drop handlers installed by setup_logging() so tests do not share log sinks."""
    yield
    root_logger = logging.getLogger(ignite_logger.ROOT_LOGGER)
    for handler in ignite_logger._installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    ignite_logger._installed_handlers.clear()

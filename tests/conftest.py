"""Pytest configuration and fixtures."""

import pytest
from loguru import logger

from gresql.logger import configure_logger


@pytest.fixture
def caplog(caplog):
    """Enable Loguru logging to be captured by pytest's caplog fixture."""
    import logging

    class PropagateHandler(logging.Handler):
        def emit(self, record):
            logging.getLogger(record.name).handle(record)

    handler_id = logger.add(PropagateHandler(), format="{message}", level="DEBUG")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the default sink after CLI tests rebind it to a captured stream."""
    yield
    configure_logger()

"""Root test configuration: logger isolation between tests"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_nodig_logger():
    """Drop handlers the CLI attaches so streams from one CliRunner run do not leak, and restore propagation for caplog."""
    yield
    logger = logging.getLogger("nodig")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach verdict log handlers and levels after each test so run logs don't leak across tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("verdict"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

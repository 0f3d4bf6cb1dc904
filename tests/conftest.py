"""Shared fixtures for relational_config tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by setup_logging so caplog sees every record."""
    yield
    logger = logging.getLogger("relational_config")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

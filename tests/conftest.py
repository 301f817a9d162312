"""Shared pytest fixtures."""

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop handlers added by tests so log files are closed."""
    yield
    logger.remove()

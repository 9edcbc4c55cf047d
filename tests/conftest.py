"""Pytest configuration and fixtures."""

import logging

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo whatever ``setup_logging`` did to the ``solid`` logger."""
    package_logger = logging.getLogger("solid")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()

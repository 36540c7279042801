"""
Pytest configuration for unit tests.

Forces plain-text rendering and makes sure no handler installed by one test
leaks into the next.
"""

import os

import pytest

from src.system_logger import reset_logging


def pytest_configure(config):
    """Configure rendering defaults for unit tests."""
    # Rich output wraps and colours lines, which makes assertions brittle
    os.environ["SYSTEMLOGGER_RICH"] = "false"
    os.environ.pop("SYSTEMLOGGER_REVEAL_PRIVATE", None)
    os.environ.pop("SYSTEMLOGGER_LEVEL", None)
    os.environ.pop("SYSTEMLOGGER_LOG_FORMAT", None)


@pytest.fixture(autouse=True)
def _reset_installed_handlers():
    yield
    reset_logging()

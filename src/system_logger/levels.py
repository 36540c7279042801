"""
Severity Levels

The severity taxonomy used by SystemLogger and its mapping onto the
standard library logging levels.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(str, Enum):
    """Severity attached to every emitted entry."""

    DEBUG = "debug"
    INFO = "info"
    DEFAULT = "default"
    WARNING = "warning"
    ERROR = "error"
    FAULT = "fault"

    @property
    def stdlib_level(self) -> int:
        """Nearest equivalent level in the ``logging`` module."""
        return _STDLIB_LEVELS[self]


# DEFAULT has no stdlib counterpart; INFO is the closest visible level
_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEFAULT: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FAULT: logging.CRITICAL,
}

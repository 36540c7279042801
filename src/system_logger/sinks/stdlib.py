"""
Standard Library Sink

Forwards entries to the ``logging`` module. Each (subsystem, category) pair
maps to the logger ``<subsystem>.<category>``, so handlers and levels can be
configured per subsystem or per category with the usual logger hierarchy.
"""

from __future__ import annotations

import logging

from src.system_logger.levels import LogLevel

PRIVATE_PLACEHOLDER = "<private>"

# Record attribute holding the clear text of a private entry
PRIVATE_MESSAGE_ATTR = "private_message"


class StdlibLoggingSink:
    """
    LogSink implementation backed by ``logging``.

    Records carry the extra attributes ``subsystem``, ``category``,
    ``severity`` and ``private`` so formatters and filters can act on them.

    Private entries are stored with PRIVATE_PLACEHOLDER as their message, so
    any handler or formatter shows the placeholder. The clear text travels on
    the ``private_message`` attribute for viewers allowed to reveal it.
    """

    def emit(
        self,
        level: LogLevel,
        subsystem: str,
        category: str,
        message: str,
        redacted: bool,
    ) -> None:
        """Write one entry to the logger for this subsystem/category."""
        logger = logging.getLogger(subsystem).getChild(category)
        extra = {
            "subsystem": subsystem,
            "category": category,
            "severity": level.value,
            "private": redacted,
        }
        if redacted:
            extra[PRIVATE_MESSAGE_ATTR] = message
            message = PRIVATE_PLACEHOLDER
        # No args: the message is never %-interpolated
        logger.log(level.stdlib_level, message, extra=extra)

    def __repr__(self) -> str:
        return "StdlibLoggingSink()"


_default_sink = StdlibLoggingSink()


def default_sink() -> StdlibLoggingSink:
    """Return the process-wide stdlib sink."""
    return _default_sink

"""
Sink Protocol Definitions

Uses typing.Protocol for duck-typed interface definitions.
No inheritance required - any class implementing ``emit`` qualifies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from src.system_logger.levels import LogLevel


@runtime_checkable
class LogSink(Protocol):
    """
    Destination for log entries.

    The stdlib implementation forwards to the ``logging`` module.
    Tests substitute an in-memory recorder.
    """

    def emit(
        self,
        level: LogLevel,
        subsystem: str,
        category: str,
        message: str,
        redacted: bool,
    ) -> None:
        """
        Write one entry.

        Args:
            level: Severity of the entry
            subsystem: Owner of the log stream
            category: Subdivision within the subsystem
            message: The payload
            redacted: True if viewers must hide the payload by default
        """
        ...


@dataclass(frozen=True)
class LogEntry:
    """A single entry as seen by a sink."""

    subsystem: str
    category: str
    level: LogLevel
    message: str
    redacted: bool = False

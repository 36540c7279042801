"""
In-Memory Sink

Records entries in a list instead of writing them anywhere.
Implements the same protocol as the stdlib sink.
"""

from __future__ import annotations

import threading

from src.system_logger.levels import LogLevel
from src.system_logger.protocols import LogEntry


class MemorySink:
    """
    In-memory implementation of LogSink.

    Perfect for unit tests - records every call for later assertions.
    Safe to share between threads.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()

    def emit(
        self,
        level: LogLevel,
        subsystem: str,
        category: str,
        message: str,
        redacted: bool,
    ) -> None:
        """Record one entry."""
        entry = LogEntry(
            subsystem=subsystem,
            category=category,
            level=level,
            message=message,
            redacted=redacted,
        )
        with self._lock:
            self._entries.append(entry)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Snapshot of recorded entries, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        """Drop all recorded entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

"""
SystemLogger Exception Hierarchy

Errors raised by sinks. The SystemLogger facade never lets these reach its
callers; they exist so sink implementations can report failures in a
structured way.

Usage:
    from src.system_logger.exceptions import SinkEmitError

    try:
        sink.emit(LogLevel.INFO, "com.example.app", "default", "hello", False)
    except SinkEmitError as e:
        print(e.failures)
"""

from __future__ import annotations


class SystemLoggerError(Exception):
    """
    Base exception for all SystemLogger errors.

    Attributes:
        message: Human-readable error description
        code: Optional machine-readable error code for programmatic handling
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class SinkError(SystemLoggerError):
    """Base class for sink-related errors."""

    pass


class SinkEmitError(SinkError):
    """One or more sinks failed to write an entry."""

    def __init__(self, failures: list[tuple[str, BaseException]]) -> None:
        names = ", ".join(name for name, _ in failures)
        super().__init__(
            f"Failed to emit to {len(failures)} sink(s): {names}",
            code="SINK_EMIT_FAILED",
        )
        self.failures = failures

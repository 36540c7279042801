"""
SystemLogger Facade

Leveled, privacy-aware, categorized logging. Every call is fire-and-forget:
nothing is returned and nothing is raised, whatever happens in the sink.

Usage:
    from src.system_logger import SystemLogger, get_main_logger

    network = SystemLogger(subsystem="com.example.myapp", category="Networking")
    network.log_info("Network request started")
    network.log_private("User email: user@example.com")

    get_main_logger().log_error("Failed to load user profile data")
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from src.system_logger.identity import DEFAULT_CATEGORY, resolve_subsystem
from src.system_logger.levels import LogLevel
from src.system_logger.protocols import LogSink
from src.system_logger.sinks.stdlib import default_sink

logger = logging.getLogger(__name__)


class SystemLogger:
    """
    Immutable facade over a LogSink, tagged with a subsystem and category.

    Exposes exactly six emit operations. Severity and redaction are not
    combinable beyond these: only log_private redacts, and it always uses
    the default severity.

    Safe for concurrent use from any number of threads; the sink is
    responsible for serializing writes.

    Attributes:
        subsystem: Owner of the log stream, usually the application identifier
        category: Subdivision within the subsystem (e.g. "Networking")
        sink: Destination for entries
    """

    __slots__ = ("_subsystem", "_category", "_sink")

    def __init__(
        self,
        subsystem: str | None = None,
        category: str = DEFAULT_CATEGORY,
        sink: LogSink | None = None,
    ) -> None:
        """
        Create a logger. Never raises.

        Args:
            subsystem: Identifier of the app or module. Defaults to the
                running application's identifier, or a fixed fallback when
                none can be determined.
            category: Area of the app, e.g. "Networking". Empty values fall
                back to "default".
            sink: Where entries go. Defaults to the stdlib logging sink.
        """
        object.__setattr__(self, "_subsystem", resolve_subsystem(subsystem))
        object.__setattr__(self, "_category", category or DEFAULT_CATEGORY)
        object.__setattr__(self, "_sink", sink if sink is not None else default_sink())

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @property
    def category(self) -> str:
        return self._category

    @property
    def sink(self) -> LogSink:
        return self._sink

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"SystemLogger(subsystem={self._subsystem!r}, category={self._category!r})"

    def log_info(self, message: str) -> None:
        """
        Log an informational message.

        Use for regular operation: app startup, user actions, completion
        of significant tasks.
        """
        self._emit(LogLevel.INFO, message)

    def log_debug(self, message: str) -> None:
        """Log a debug message with development-time detail."""
        self._emit(LogLevel.DEBUG, message)

    def log_warning(self, message: str) -> None:
        """
        Log a warning message.

        Something unexpected happened but the app is not malfunctioning.
        """
        self._emit(LogLevel.WARNING, message)

    def log_error(self, message: str) -> None:
        """
        Log an error message.

        A serious issue occurred but the app can keep running.
        """
        self._emit(LogLevel.ERROR, message)

    def log_critical(self, message: str) -> None:
        """
        Log a critical (fault) message.

        Reserved for unrecoverable states. Use sparingly.
        """
        self._emit(LogLevel.FAULT, message)

    def log_private(self, message: str) -> None:
        """
        Log a message whose whole payload is private.

        Viewers show a placeholder instead of the message unless private
        data has been explicitly revealed. Use for user data and identifiers.
        """
        self._emit(LogLevel.DEFAULT, message, redacted=True)

    def _emit(self, level: LogLevel, message: str, redacted: bool = False) -> None:
        try:
            self._sink.emit(level, self._subsystem, self._category, message, redacted)
        except Exception:
            logger.debug(
                "Dropped %s entry for %s/%s: sink %s failed",
                level.value,
                self._subsystem,
                self._category,
                type(self._sink).__name__,
                exc_info=True,
            )


# =============================================================================
# Shared instance
# =============================================================================

_main_logger: SystemLogger | None = None
_main_logger_lock = threading.Lock()


def get_main_logger() -> SystemLogger:
    """
    Get the process-wide logger with the default subsystem and category.

    Built on first access and reused for the lifetime of the process.
    Prefer passing the result to the code that needs it over calling this
    from deep inside a module.
    """
    global _main_logger

    if _main_logger is None:
        with _main_logger_lock:
            if _main_logger is None:
                _main_logger = SystemLogger()
    return _main_logger

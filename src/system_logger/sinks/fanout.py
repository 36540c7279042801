"""
Fan-out Sink

Sends every entry to several sinks, e.g. the stdlib sink plus a recorder.
"""

from __future__ import annotations

from src.system_logger.exceptions import SinkEmitError
from src.system_logger.levels import LogLevel
from src.system_logger.protocols import LogSink


class FanoutSink:
    """
    LogSink that forwards to each wrapped sink in order.

    A failing sink does not stop delivery to the others. Failures are
    collected and raised together as a SinkEmitError once every sink
    has been tried.
    """

    def __init__(self, *sinks: LogSink) -> None:
        self._sinks = tuple(sinks)

    @property
    def sinks(self) -> tuple[LogSink, ...]:
        """The wrapped sinks."""
        return self._sinks

    def emit(
        self,
        level: LogLevel,
        subsystem: str,
        category: str,
        message: str,
        redacted: bool,
    ) -> None:
        failures: list[tuple[str, BaseException]] = []
        for sink in self._sinks:
            try:
                sink.emit(level, subsystem, category, message, redacted)
            except Exception as e:
                failures.append((type(sink).__name__, e))

        if failures:
            raise SinkEmitError(failures)

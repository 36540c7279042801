"""
SystemLogger

Leveled, privacy-aware, categorized logging facade over a pluggable sink.
"""

from src.system_logger.config import SystemLoggerConfig
from src.system_logger.exceptions import SinkEmitError, SinkError, SystemLoggerError
from src.system_logger.identity import (
    DEFAULT_CATEGORY,
    FALLBACK_SUBSYSTEM,
    application_identifier,
    resolve_subsystem,
)
from src.system_logger.levels import LogLevel
from src.system_logger.logger import SystemLogger, get_main_logger
from src.system_logger.privacy import (
    PrivacyFormatter,
    configure_logging,
    is_private,
    reset_logging,
)
from src.system_logger.protocols import LogEntry, LogSink
from src.system_logger.sinks import FanoutSink, MemorySink, StdlibLoggingSink, default_sink
from src.system_logger.sinks.stdlib import PRIVATE_MESSAGE_ATTR, PRIVATE_PLACEHOLDER

__all__ = [
    # Facade
    "SystemLogger",
    "get_main_logger",
    # Levels and entries
    "LogLevel",
    "LogEntry",
    # Sinks
    "LogSink",
    "StdlibLoggingSink",
    "MemorySink",
    "FanoutSink",
    "default_sink",
    # Identity
    "DEFAULT_CATEGORY",
    "FALLBACK_SUBSYSTEM",
    "application_identifier",
    "resolve_subsystem",
    # Rendering
    "PRIVATE_MESSAGE_ATTR",
    "PRIVATE_PLACEHOLDER",
    "PrivacyFormatter",
    "configure_logging",
    "is_private",
    "reset_logging",
    # Config
    "SystemLoggerConfig",
    # Errors
    "SystemLoggerError",
    "SinkError",
    "SinkEmitError",
]

"""
Log Sinks

Destinations a SystemLogger can write to:
- StdlibLoggingSink: the ``logging`` module (default)
- MemorySink: in-memory recorder for tests
- FanoutSink: several sinks at once
"""

from src.system_logger.sinks.fanout import FanoutSink
from src.system_logger.sinks.memory import MemorySink
from src.system_logger.sinks.stdlib import StdlibLoggingSink, default_sink

__all__ = [
    "FanoutSink",
    "MemorySink",
    "StdlibLoggingSink",
    "default_sink",
]

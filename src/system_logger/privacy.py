"""
Private Payload Rendering

Entries written with ``log_private`` reach ``logging`` with a placeholder
message, so every handler hides them by default. PrivacyFormatter lets an
authorized handler render the clear text instead.
"""

from __future__ import annotations

import logging
from typing import IO

from rich.console import Console
from rich.logging import RichHandler

from src.system_logger.sinks.stdlib import PRIVATE_MESSAGE_ATTR, PRIVATE_PLACEHOLDER

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
RICH_FORMAT = "%(name)s: %(message)s"

# Handlers installed on the root logger by configure_logging
_installed_handlers: list[logging.Handler] = []
_previous_root_level: int | None = None


def is_private(record: logging.LogRecord) -> bool:
    """Check whether a record was marked private by its sink."""
    return bool(getattr(record, "private", False))


class PrivacyFormatter(logging.Formatter):
    """
    A formatter that controls how private records are rendered.

    By default private records keep their placeholder message. With
    ``reveal_private=True`` the clear text is rendered instead. The record
    itself is never modified, so other handlers on the same logger still
    see the placeholder.

    Usage:
        handler = logging.StreamHandler()
        handler.setFormatter(PrivacyFormatter())
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        reveal_private: bool = False,
        placeholder: str = PRIVATE_PLACEHOLDER,
    ):
        """
        Initialize the formatter.

        Args:
            fmt: Log format string (uses default if not specified)
            datefmt: Date format string
            reveal_private: If True, private messages are rendered in clear
            placeholder: Text shown instead of a private message
        """
        super().__init__(fmt or DEFAULT_FORMAT, datefmt)
        self.reveal_private = reveal_private
        self.placeholder = placeholder

    def format(self, record: logging.LogRecord) -> str:
        if is_private(record):
            if self.reveal_private:
                shown = getattr(record, PRIVATE_MESSAGE_ATTR, self.placeholder)
            else:
                shown = self.placeholder
            record = logging.makeLogRecord(record.__dict__)
            record.msg = shown
            record.args = None
        return super().format(record)


def configure_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
    reveal_private: bool = False,
    rich: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """
    Install a privacy-aware handler on the root logger.

    Calling this again replaces the handler installed by the previous
    call instead of adding a second one.

    Args:
        level: Logging level for the root logger and the handler
        format_string: Log format string (uses default if not specified)
        reveal_private: Render private messages in clear
        rich: Use rich's console handler instead of a plain stream handler
        stream: Output stream (stderr if not specified)

    Returns:
        The installed handler
    """
    global _previous_root_level

    reset_logging()

    handler: logging.Handler
    if rich:
        console = Console(file=stream, stderr=stream is None)
        handler = RichHandler(console=console, show_path=False)
        formatter = PrivacyFormatter(format_string or RICH_FORMAT, reveal_private=reveal_private)
    else:
        handler = logging.StreamHandler(stream)
        formatter = PrivacyFormatter(format_string, reveal_private=reveal_private)

    handler.setFormatter(formatter)
    handler.setLevel(level)

    root_logger = logging.getLogger()
    _previous_root_level = root_logger.level
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _installed_handlers.append(handler)

    return handler


def reset_logging() -> None:
    """Remove every handler installed by configure_logging and restore the root level."""
    global _previous_root_level

    root_logger = logging.getLogger()
    if _previous_root_level is not None:
        root_logger.setLevel(_previous_root_level)
        _previous_root_level = None
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

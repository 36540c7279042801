"""
Emit command - Write a single log entry from the shell.

Usage:
    python -m src.cli.main emit "Cache warmed" --subsystem com.example.app --category Cache
    python -m src.cli.main emit "Disk almost full" --level warning
    python -m src.cli.main emit "User email: user@example.com" --private
"""

from __future__ import annotations

from enum import Enum

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from src.system_logger import SystemLogger, SystemLoggerConfig, configure_logging, reset_logging

console = Console()


def load_config() -> SystemLoggerConfig:
    """Read SystemLoggerConfig, exiting with status 1 if the environment is invalid."""
    try:
        return SystemLoggerConfig()
    except ValidationError as e:
        for error in e.errors():
            field = "_".join(str(part) for part in error["loc"]).upper()
            console.print(
                f"[red]Error:[/red] Invalid SYSTEMLOGGER_{field}: {escape(error['msg'])}"
            )
        raise typer.Exit(1) from e


class EmitLevel(str, Enum):
    """Severities selectable from the command line."""

    INFO = "info"
    DEBUG = "debug"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def emit_command(
    message: str = typer.Argument(..., help="Message to log"),
    level: EmitLevel = typer.Option(
        EmitLevel.INFO,
        "--level",
        "-l",
        case_sensitive=False,
        help="Severity of the entry",
    ),
    subsystem: str | None = typer.Option(
        None,
        "--subsystem",
        "-s",
        help="Subsystem to tag the entry with (defaults to the application identifier)",
    ),
    category: str = typer.Option(
        "default",
        "--category",
        "-c",
        help="Category within the subsystem",
    ),
    private: bool = typer.Option(
        False,
        "--private",
        "-p",
        help="Redact the message in rendered output",
    ),
    reveal_private: bool = typer.Option(
        False,
        "--reveal-private",
        help="Render private messages in clear (same as SYSTEMLOGGER_REVEAL_PRIVATE=true)",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain text output instead of rich",
    ),
) -> None:
    """
    Write one log entry.

    Private entries always use the default severity, so --private cannot be
    combined with a --level other than info.
    """
    if private and level is not EmitLevel.INFO:
        console.print("[red]Error:[/red] --private cannot be combined with --level")
        raise typer.Exit(1)

    config = load_config()
    configure_logging(
        level=config.level,
        format_string=config.log_format,
        reveal_private=config.reveal_private or reveal_private,
        rich=config.rich and not plain,
    )
    try:
        logger = SystemLogger(subsystem=subsystem, category=category)
        if private:
            logger.log_private(message)
        else:
            _LEVEL_METHODS[level](logger, message)
    finally:
        reset_logging()


_LEVEL_METHODS = {
    EmitLevel.INFO: SystemLogger.log_info,
    EmitLevel.DEBUG: SystemLogger.log_debug,
    EmitLevel.WARNING: SystemLogger.log_warning,
    EmitLevel.ERROR: SystemLogger.log_error,
    EmitLevel.CRITICAL: SystemLogger.log_critical,
}

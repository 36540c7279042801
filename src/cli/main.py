"""
SystemLogger CLI

Entry point for the system-logger command-line interface.

Usage:
    python -m src.cli.main emit "Network request started" --category Networking
    python -m src.cli.main show-config
    python -m src.cli.main --help
"""

import typer
from rich.console import Console
from rich.table import Table

from src.cli.commands.emit import emit_command, load_config
from src.system_logger import FALLBACK_SUBSYSTEM, get_main_logger

app = typer.Typer(
    name="system-logger",
    help="SystemLogger - Leveled, privacy-aware, categorized logging",
    no_args_is_help=True,
)

console = Console()

# Register commands
app.command(name="emit", help="Write one log entry")(emit_command)


@app.command(name="show-config")
def show_config() -> None:
    """Show the effective rendering configuration and default logger identity."""
    config = load_config()
    main_logger = get_main_logger()

    table = Table(title="SystemLogger Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("level", config.level)
    table.add_row("reveal_private", str(config.reveal_private))
    table.add_row("rich", str(config.rich))
    table.add_row("log_format", config.log_format or "(default)")
    table.add_row("default subsystem", main_logger.subsystem)
    table.add_row("default category", main_logger.category)
    table.add_row("fallback subsystem", FALLBACK_SUBSYSTEM)

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from src import __version__
    typer.echo(f"system-logger version {__version__}")


if __name__ == "__main__":
    app()

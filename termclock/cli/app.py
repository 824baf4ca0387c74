"""Main Typer application — imports and registers all CLI commands.

Entry point: ``termclock`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from termclock.cli.commands.run_cmd import run_cmd
from termclock.cli.commands.snapshot_cmd import snapshot_cmd
from termclock.config import ClockSettings

app = typer.Typer(
    name="termclock",
    help="termclock: an analog clock face in your terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


def configure_logging(settings: ClockSettings) -> None:
    """Configure the root logger from *settings*.

    Logs go to ``settings.log_file`` when set, so they do not scribble
    over the clock; otherwise to stderr through Rich.
    """
    if settings.log_file is not None:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[handler],
        force=True,
    )


@app.callback()
def main_callback() -> None:
    """termclock: an analog clock face in your terminal."""
    configure_logging(ClockSettings())


# Register subcommands
app.command(name="run", help="Run the live clock (Ctrl+C to exit).")(run_cmd)
app.command(name="snapshot", help="Print a single clock frame.")(snapshot_cmd)


@app.command(name="settings", help="Show the effective settings.")
def settings_cmd() -> None:
    """Show the effective settings after env and .env overrides."""
    console = Console()
    current = ClockSettings()

    table = Table(title="termclock settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Env var", style="dim")

    for name, value in current.model_dump().items():
        table.add_row(name, repr(value), f"TERMCLOCK_{name.upper()}")

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()

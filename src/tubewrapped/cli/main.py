"""
Main CLI entry point for tubewrapped.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.panel import Panel

from tubewrapped import __version__
from tubewrapped.cli.constants import LOG_FORMAT
from tubewrapped.cli.wrapped_commands import analyze_export, list_years, peek_export
from tubewrapped.config.settings import settings

console = Console()

app = typer.Typer(
    name="tubewrapped",
    help="Your YouTube year in review, from a Google Takeout export",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("analyze")(analyze_export)
app.command("peek")(peek_export)
app.command("years")(list_years)


def configure_logging(verbose: bool = False) -> None:
    """Send tubewrapped log records to stderr at the configured level."""
    log_level = logging.DEBUG if verbose else getattr(logging, settings.log_level)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    package_logger = logging.getLogger("tubewrapped")
    package_logger.handlers = [handler]
    package_logger.setLevel(log_level)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold red]tubewrapped[/bold red] v{__version__}",
            title="Version",
            border_style="red",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log parsing details to stderr"
    ),
) -> None:
    """
    tubewrapped - Your YouTube year in review.

    Reads the watch-history export from Google Takeout and summarizes a year
    of viewing: top channels, binge sessions, rewatches and fun facts.
    """
    if version:
        console.print(f"tubewrapped v{__version__}")
        raise typer.Exit(code=0)

    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        console.print(
            "[yellow]Use 'tubewrapped --help' for available commands[/yellow]"
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

"""CLI entry point for vozfin."""

import typer

from vozfin.commands.admin import init_command, list_command
from vozfin.commands.voice import parse_command, voice_command
from vozfin.config import load_settings
from vozfin.logging_setup import configure_logging

app = typer.Typer(
    name="vozfin",
    help="vozfin - Register your income and expenses by voice",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """vozfin - Register your income and expenses by voice."""
    if verbose:
        configure_logging("DEBUG")
        return
    try:
        configure_logging(load_settings().log_level)
    except ValueError:
        # Commands that need settings report the config error themselves.
        configure_logging()


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize vozfin database and configuration."""
    init_command(force)


@app.command()
def parse(
    text: str,
    date: str = typer.Option(None, "--date", help="Capture date (default: today)"),
) -> None:
    """Interpret a transcript and show the transaction it describes."""
    parse_command(text, date)


@app.command()
def voice(
    date: str = typer.Option(None, "--date", help="Capture date (default: today)"),
) -> None:
    """Dictate a transaction, confirm it and save it."""
    voice_command(date)


@app.command(name="list")
def list_transactions(
    limit: int = typer.Option(50, help="Maximum transactions to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all your transactions"),
) -> None:
    """List your transactions."""
    list_command(limit, all)


if __name__ == "__main__":
    app()

"""Admin commands for init and listing transactions."""

import sqlite3
import sys

from rich.console import Console
from rich.table import Table

from vozfin.config import create_default_config, get_config_path
from vozfin.domain.models import CATEGORY_LABELS, Category, Money, format_money_display
from vozfin.store.queries import get_all_transactions
from vozfin.store.schema import get_db_path, init_database

console = Console()


def init_command(force: bool = False) -> None:
    """Initialize vozfin database and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    if not force and (db_exists or config_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if db_exists:
            console.print(f"  Database already exists: {db_path}")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'vozfin init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def list_command(
    limit: int = 50,
    all: bool = False,
) -> None:
    """List transactions."""
    db_path = get_db_path()

    if not db_path.exists():
        console.print("[red]Database not found. Run 'vozfin init' first.[/red]", style="bold")
        sys.exit(1)

    try:
        actual_limit = None if all else limit
        transactions = get_all_transactions(db_path, actual_limit)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    title = f"Transactions (showing all {len(transactions)})" if all else f"Transactions (showing {len(transactions)})"
    table = Table(title=title)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")
    table.add_column("Category", style="magenta")

    for txn in transactions:
        amount = Money(txn["amount"])
        if txn["type"] == "expense":
            amount_display = f"[red]{format_money_display(Money(-amount), include_sign=True)}[/red]"
        else:
            amount_display = f"[green]{format_money_display(amount, include_sign=True)}[/green]"

        try:
            category = CATEGORY_LABELS[Category(txn["category"])]
        except ValueError:
            category = txn["category"]

        table.add_row(str(txn["id"]), txn["date"], txn["description"], amount_display, category)

    console.print(table)

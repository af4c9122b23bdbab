"""Voice entry commands: interpret transcripts and store confirmed transactions."""

import asyncio
import sqlite3
import sys
from datetime import date

import pandas as pd
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vozfin.config import Settings, load_settings
from vozfin.domain.interpreter import TransactionCandidate, apply_edits, interpret_transcript
from vozfin.domain.models import CATEGORY_LABELS, TYPE_LABELS, Category, format_money_display, to_money
from vozfin.speech.console import ConsoleSpeechEngine
from vozfin.speech.controller import CaptureController, PermissionState
from vozfin.store.queries import insert_transaction
from vozfin.store.schema import database_exists, get_db_path

console = Console()

NO_AMOUNT_MESSAGE = 'Não consegui identificar um valor. Tente algo como "Gastei 50 reais no mercado hoje".'


def normalize_date(raw_date: str) -> date:
    """Normalize a typed date to a calendar date.

    Uses pandas.to_datetime so that ISO and day-first formats
    (DD/MM/YYYY) are both accepted.

    Args:
        raw_date: Date as typed by the operator.

    Returns:
        Parsed date.

    Raises:
        ValueError: If date cannot be parsed.
    """
    try:
        return pd.to_datetime(raw_date, dayfirst=True).date()
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e


def resolve_today(date_option: str | None) -> date:
    """Resolve the capture date from an optional --date value."""
    if date_option is None:
        return date.today()
    try:
        return normalize_date(date_option)
    except ValueError as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)


def display_candidate(candidate: TransactionCandidate) -> None:
    """Render a candidate for confirmation."""
    table = Table(title="Transação identificada", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    amount_style = "green" if candidate.type.value == "income" else "red"
    if candidate.confidence >= 70:
        confidence_style = "green"
    else:
        confidence_style = "yellow"

    table.add_row("Tipo", TYPE_LABELS[candidate.type])
    table.add_row("Valor", f"[{amount_style}]{format_money_display(to_money(candidate.amount))}[/{amount_style}]")
    table.add_row("Categoria", CATEGORY_LABELS[candidate.category])
    table.add_row("Descrição", escape(candidate.description))
    table.add_row("Data", candidate.date.strftime("%d/%m/%Y"))
    table.add_row("Confiança", f"[{confidence_style}]{candidate.confidence}%[/{confidence_style}]")

    console.print(table)


def prompt_edits(candidate: TransactionCandidate) -> TransactionCandidate:
    """Prompt the operator for corrections until the values are valid.

    Args:
        candidate: Candidate to edit.

    Returns:
        Edited candidate.
    """
    categories = ", ".join(c.value for c in Category)

    while True:
        txn_type = typer.prompt("Tipo (income/expense)", default=candidate.type.value)
        amount = typer.prompt("Valor", default=f"{candidate.amount:.2f}".replace(".", ","))
        category = typer.prompt(f"Categoria ({categories})", default=candidate.category.value)
        description = typer.prompt("Descrição", default=candidate.description)
        raw_date = typer.prompt("Data", default=candidate.date.strftime("%d/%m/%Y"))

        try:
            return apply_edits(
                candidate,
                txn_type=txn_type,
                amount=amount,
                category=category,
                description=description,
                txn_date=normalize_date(raw_date),
            )
        except ValueError as e:
            console.print(f"[red]{e}[/red]\n")


def store_candidate(candidate: TransactionCandidate) -> None:
    """Append a confirmed candidate to the transaction store."""
    db_path = get_db_path()

    if not database_exists(db_path):
        console.print("[red]Database not found. Run 'vozfin init' first.[/red]", style="bold")
        sys.exit(1)

    try:
        txn_id = insert_transaction(candidate, db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Transaction added (ID: {txn_id})")


async def capture_transcript(controller: CaptureController) -> str | None:
    """Run one capture session and wait for its transcript."""
    controller.reset()
    await controller.start_listening()
    return await controller.wait_for_outcome()


def build_controller(settings: Settings) -> CaptureController:
    engine = ConsoleSpeechEngine(console=console, language=settings.language)
    return CaptureController(engine, origin=settings.origin, retry_delay=settings.retry_delay)


def parse_command(text: str, date_option: str | None = None) -> None:
    """Interpret a transcript and show the resulting candidate.

    Args:
        text: Transcript text.
        date_option: Capture date override (defaults to today).
    """
    today = resolve_today(date_option)
    candidate = interpret_transcript(text, today)

    if candidate is None:
        console.print(f"[yellow]{NO_AMOUNT_MESSAGE}[/yellow]")
        sys.exit(1)

    display_candidate(candidate)


def voice_command(date_option: str | None = None) -> None:
    """Capture a spoken transaction, confirm it and store it.

    Args:
        date_option: Capture date override (defaults to today).
    """
    today = resolve_today(date_option)

    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]", style="bold")
        sys.exit(1)

    controller = build_controller(settings)
    if not controller.supported:
        console.print(f"[red]{controller.session.error}[/red]")
        console.print("[dim]Use 'vozfin parse' to enter the transaction as text[/dim]")
        sys.exit(1)

    console.print('[cyan]Fale naturalmente sobre sua transação. Exemplo: "Gastei 50 reais no mercado hoje"[/cyan]')

    while True:
        try:
            transcript = asyncio.run(capture_transcript(controller))
        finally:
            controller.stop_listening()

        if transcript is None:
            console.print(f"[red]{controller.session.error or 'Nenhuma fala detectada.'}[/red]")
            if controller.session.permission is PermissionState.DENIED:
                sys.exit(1)
            if not typer.confirm("Tentar novamente?", default=True):
                sys.exit(1)
            continue

        console.print(f'[dim]Você disse: "{escape(transcript)}"[/dim]')
        candidate = interpret_transcript(transcript, today)

        if candidate is None:
            console.print(f"[yellow]{NO_AMOUNT_MESSAGE}[/yellow]")
            if not typer.confirm("Tentar novamente?", default=True):
                sys.exit(1)
            continue

        while True:
            display_candidate(candidate)
            choice = typer.prompt(
                "Confirmar (c), editar (e), falar novamente (r) ou sair (q)", type=str, default="c"
            ).lower()

            if choice == "e":
                candidate = prompt_edits(candidate)
                continue
            if choice in ("c", "r", "q"):
                break
            console.print("[red]Invalid choice[/red]")

        if choice == "q":
            console.print("[yellow]Exiting[/yellow]")
            return
        if choice == "r":
            continue

        store_candidate(candidate)
        return

"""Summary commands for aggregate and monthly totals."""

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from pennybook.commands.records import print_lines, render_totals
from pennybook.domain.models import Record
from pennybook.domain.query import apply_filters, monthly_totals
from pennybook.domain.report import format_monthly_table
from pennybook.store import Ledger

console = Console(emoji=False)


def render_monthly(records: Iterable[Record]) -> None:
    """Print income, expense and net per month."""
    monthly = monthly_totals(records)
    if not monthly:
        console.print("[yellow]No dated records found.[/yellow]")
        return
    print_lines(format_monthly_table(monthly))


def summary_command(data_path: Path, from_date: str = "", to_date: str = "", category: str = "") -> None:
    """Show total income, expense and net balance."""
    ledger = Ledger.open(data_path)
    render_totals(apply_filters(ledger.records, from_date, to_date, category))


def monthly_command(data_path: Path) -> None:
    """Show totals for each month."""
    ledger = Ledger.open(data_path)
    render_monthly(ledger.records)

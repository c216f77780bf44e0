"""Record commands (add, list, export)."""

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from pennybook.dates import month_range, normalize_date, today
from pennybook.domain.models import Month, Record
from pennybook.domain.query import aggregate_totals, apply_filters
from pennybook.domain.records import format_amount, make_record, parse_amount
from pennybook.domain.report import format_record_table, format_totals
from pennybook.store import Ledger

console = Console(emoji=False)


def print_lines(lines: list[str]) -> None:
    """Print plain text lines without markup or highlighting."""
    for line in lines:
        console.print(escape(line), highlight=False)


def render_records(records: Sequence[Record]) -> None:
    """Print records as a fixed-width table."""
    if not records:
        console.print("[yellow]No records found.[/yellow]")
        return
    print_lines(format_record_table(records))


def render_totals(records: Iterable[Record]) -> None:
    """Print income, expense and net balance for records."""
    print_lines(format_totals(aggregate_totals(records)))


def add_record(ledger: Ledger, date: str, amount: str, category: str = "", note: str = "") -> bool:
    """Add a record from user-entered values and save the ledger.

    Args:
        ledger: Ledger to append to.
        date: Date as typed; blank means today.
        amount: Amount as typed (negative for expenses, positive for income).
        category: Category; blank means "Uncategorized".
        note: Optional note.

    Returns:
        True if the record was added, False if the add was aborted.
    """
    if date.strip():
        try:
            record_date = normalize_date(date)
        except ValueError:
            console.print("[red]Invalid date. Aborting add.[/red]")
            console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
            return False
    else:
        record_date = today()

    parsed_amount, error = parse_amount(amount)
    if parsed_amount is None:
        console.print("[red]Invalid amount. Aborting add.[/red]")
        console.print(f"[dim]{escape(error or '')}[/dim]")
        return False

    record = make_record(record_date, parsed_amount, category, note)

    try:
        ledger.append_and_persist(record)
    except OSError as e:
        console.print(f"[red]Could not save {escape(str(ledger.data_path))}: {escape(str(e))}[/red]", style="bold")
        return False

    console.print("[green]✓[/green] Record added:")
    console.print(f"  Date: {record.date}", highlight=False)
    console.print(f"  Amount: {format_amount(record.amount)}", highlight=False)
    console.print(f"  Category: {escape(record.category)}", highlight=False)
    if record.note:
        console.print(f"  Note: {escape(record.note)}", highlight=False)
    return True


def export_ledger(ledger: Ledger, filename: str) -> bool:
    """Export every record in the ledger to another file.

    Args:
        ledger: Ledger to export.
        filename: Destination filename.

    Returns:
        True if the export was written, False otherwise.
    """
    if not filename.strip():
        console.print("[red]Invalid filename.[/red]")
        return False

    try:
        count = ledger.export(filename)
    except OSError as e:
        console.print(f"[red]Export failed: {escape(str(e))}[/red]", style="bold")
        return False

    console.print(f"[green]✓[/green] Exported {count} records to {escape(filename)}")
    return True


def add_command(data_path: Path, date: str, amount: str, category: str = "", note: str = "") -> None:
    """Add a record to the ledger file."""
    ledger = Ledger.open(data_path)
    if not add_record(ledger, date, amount, category, note):
        sys.exit(1)


def list_command(
    data_path: Path,
    from_date: str = "",
    to_date: str = "",
    month: str | None = None,
    category: str = "",
    summary: bool = False,
) -> None:
    """List records, optionally filtered by date range, month and category."""
    if month:
        try:
            from_date, to_date, _ = month_range(Month(month))
        except ValueError:
            console.print(f"[red]Invalid month: {escape(month)} (expected YYYY-MM)[/red]")
            sys.exit(1)

    ledger = Ledger.open(data_path)
    filtered = apply_filters(ledger.records, from_date, to_date, category)

    render_records(filtered)

    if summary:
        console.print()
        render_totals(filtered)


def export_command(data_path: Path, filename: str) -> None:
    """Export the whole ledger to another file."""
    ledger = Ledger.open(data_path)
    if not export_ledger(ledger, filename):
        sys.exit(1)

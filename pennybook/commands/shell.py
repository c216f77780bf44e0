"""Interactive menu loop."""

import typer
from rich.console import Console

from pennybook.commands.records import add_record, export_ledger, render_records, render_totals
from pennybook.commands.summary import render_monthly
from pennybook.domain.query import filter_by_category, filter_by_date
from pennybook.store import Ledger

console = Console()

MENU = """
[bold cyan]pennybook[/bold cyan]
  1) Add record
  2) List records
  3) Show summary
  4) Monthly summary
  5) Export to file
  0) Exit"""


def ask(text: str) -> str:
    """Prompt for a line of text, allowing a blank answer."""
    return typer.prompt(text, default="", show_default=False)


def ask_yes(text: str) -> bool:
    """Ask a y/n question; anything not starting with y is no."""
    return ask(f"{text} (y/n)").strip()[:1].lower() == "y"


def prompt_add(ledger: Ledger) -> None:
    """Collect record fields and add the record."""
    date = ask("Enter date (YYYY-MM-DD) [leave blank for today]")
    amount = ask("Enter amount (positive for income, negative for expense)")
    category = ask("Enter category (e.g., Food, Salary, Rent)")
    note = ask("Enter note (optional)")
    add_record(ledger, date, amount, category, note)


def prompt_filters_and_list(ledger: Ledger) -> None:
    """Ask for optional filters, list the matching records and offer a summary."""
    from_date = to_date = ""
    if ask_yes("Filter by date range?"):
        from_date = ask("From (YYYY-MM-DD) [leave blank for no lower bound]")
        to_date = ask("To (YYYY-MM-DD)   [leave blank for no upper bound]")
    filtered = filter_by_date(ledger.records, from_date, to_date)

    if ask_yes("Filter by category?"):
        category = ask("Enter category")
        if category:
            filtered = filter_by_category(filtered, category)

    render_records(filtered)

    if ask_yes("\nShow summary for these records?"):
        render_totals(filtered)


def prompt_export(ledger: Ledger) -> None:
    """Ask for a filename and export the whole ledger to it."""
    filename = ask("Enter filename to export to (e.g., export.csv)")
    export_ledger(ledger, filename)


def run_shell(ledger: Ledger) -> None:
    """Run the menu until the user exits or input ends.

    Args:
        ledger: Ledger loaded for this session.
    """
    console.print(f"[dim]Ledger: {ledger.data_path} ({len(ledger)} records)[/dim]")

    while True:
        console.print(MENU)
        try:
            choice = ask("Choose").strip()

            if choice == "1":
                prompt_add(ledger)
            elif choice == "2":
                prompt_filters_and_list(ledger)
            elif choice == "3":
                render_totals(ledger.records)
            elif choice == "4":
                render_monthly(ledger.records)
            elif choice == "5":
                prompt_export(ledger)
            elif choice == "0":
                break
            else:
                console.print("[red]Invalid choice[/red]")
        except typer.Abort:
            console.print()
            break

    console.print("[dim]Goodbye.[/dim]")

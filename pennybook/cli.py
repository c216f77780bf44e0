"""CLI entry point for pennybook."""

import logging
import os
from pathlib import Path

import typer

from pennybook.commands.admin import init_command
from pennybook.commands.records import add_command, export_command, list_command
from pennybook.commands.shell import run_shell
from pennybook.commands.summary import monthly_command, summary_command
from pennybook.config import get_setting
from pennybook.logging_setup import LOG_LEVEL_ENV, configure_logging
from pennybook.store import Ledger, get_data_path

app = typer.Typer(
    name="pennybook",
    help="pennybook - A personal income and expense ledger in a CSV file",
    add_completion=False,
)


def _data_path(ctx: typer.Context) -> Path:
    return ctx.obj if isinstance(ctx.obj, Path) else get_data_path()


def _configured_log_level() -> str | None:
    return os.environ.get(LOG_LEVEL_ENV) or get_setting("log_level")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: str = typer.Option(None, "--file", "-f", help="Ledger file (default: data.csv or config data_file)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """pennybook - A personal income and expense ledger in a CSV file."""
    configure_logging(logging.DEBUG if verbose else _configured_log_level())

    ctx.obj = get_data_path(file)

    if ctx.invoked_subcommand is None:
        run_shell(Ledger.open(ctx.obj))


@app.command()
def add(
    ctx: typer.Context,
    amount: str = typer.Option(..., "--amount", "-a", help="Amount (negative for expenses, positive for income)"),
    date: str = typer.Option("", "--date", "-d", help="Date (YYYY-MM-DD, default: today)"),
    category: str = typer.Option("", "--category", "-c", help="Category (default: Uncategorized)"),
    note: str = typer.Option("", "--note", "-n", help="Optional note"),
) -> None:
    """Add an income or expense record."""
    add_command(_data_path(ctx), date, amount, category, note)


@app.command(name="list")
def list_records(
    ctx: typer.Context,
    from_date: str = typer.Option("", "--from", help="Earliest date (YYYY-MM-DD, inclusive)"),
    to_date: str = typer.Option("", "--to", help="Latest date (YYYY-MM-DD, inclusive)"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM), overrides --from/--to"),
    category: str = typer.Option("", "--category", "-c", help="Exact category (case-sensitive)"),
    summary: bool = typer.Option(False, "--summary", "-s", help="Show totals for the listed records"),
) -> None:
    """List your records."""
    list_command(_data_path(ctx), from_date, to_date, month, category, summary)


@app.command()
def summary(
    ctx: typer.Context,
    from_date: str = typer.Option("", "--from", help="Earliest date (YYYY-MM-DD, inclusive)"),
    to_date: str = typer.Option("", "--to", help="Latest date (YYYY-MM-DD, inclusive)"),
    category: str = typer.Option("", "--category", "-c", help="Exact category (case-sensitive)"),
) -> None:
    """Show total income, expense and net balance."""
    summary_command(_data_path(ctx), from_date, to_date, category)


@app.command()
def monthly(ctx: typer.Context) -> None:
    """Show income, expense and net balance per month."""
    monthly_command(_data_path(ctx))


@app.command()
def export(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help="File to export all records to"),
) -> None:
    """Export all records to another CSV file."""
    export_command(_data_path(ctx), filename)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Start the interactive menu."""
    run_shell(Ledger.open(_data_path(ctx)))


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create the pennybook configuration file."""
    init_command(force)


if __name__ == "__main__":
    app()

"""Pure functions for laying out ledger tables and summaries.

This module contains the functional core for display:
- No I/O operations (no files, no console)
- Returns plain text lines; the command layer prints them

Columns are left-aligned at fixed widths and amounts always show two
decimals.
"""

from collections.abc import Iterable

from pennybook.domain.models import Month, Record, Totals
from pennybook.domain.records import format_amount

DATE_WIDTH = 12
AMOUNT_WIDTH = 12
CATEGORY_WIDTH = 15
RECORD_RULE_WIDTH = 60

MONTH_WIDTH = 10
TOTAL_WIDTH = 12
MONTH_RULE_WIDTH = 50


def format_record_header() -> list[str]:
    """Get the record table header and its rule."""
    return [
        f"{'Date':<{DATE_WIDTH}}{'Amount':<{AMOUNT_WIDTH}}{'Category':<{CATEGORY_WIDTH}}Note",
        "-" * RECORD_RULE_WIDTH,
    ]


def format_record_row(record: Record) -> str:
    """Format one record as a table row.

    Args:
        record: Record to format.

    Returns:
        Row with date, amount, category and note columns.
    """
    return (
        f"{record.date:<{DATE_WIDTH}}"
        f"{format_amount(record.amount):<{AMOUNT_WIDTH}}"
        f"{record.category:<{CATEGORY_WIDTH}}"
        f"{record.note}"
    )


def format_record_table(records: Iterable[Record]) -> list[str]:
    """Format records as a table.

    Args:
        records: Records to show, in display order.

    Returns:
        Header, rule and one row per record.
    """
    return format_record_header() + [format_record_row(record) for record in records]


def format_totals(totals: Totals) -> list[str]:
    """Format aggregate totals.

    Args:
        totals: Totals to show.

    Returns:
        Income, expense and net balance lines.
    """
    return [
        f"Total income : {format_amount(totals.income)}",
        f"Total expense: {format_amount(totals.expense)}",
        f"Net balance  : {format_amount(totals.net)}",
    ]


def format_monthly_table(monthly: dict[Month, Totals]) -> list[str]:
    """Format month-bucketed totals as a table.

    Args:
        monthly: Month key to totals, already in display order.

    Returns:
        Header, rule and one row per month.
    """
    lines = [
        f"{'Month':<{MONTH_WIDTH}}{'Income':<{TOTAL_WIDTH}}{'Expense':<{TOTAL_WIDTH}}Net",
        "-" * MONTH_RULE_WIDTH,
    ]
    for month, totals in monthly.items():
        lines.append(
            f"{month:<{MONTH_WIDTH}}"
            f"{format_amount(totals.income):<{TOTAL_WIDTH}}"
            f"{format_amount(totals.expense):<{TOTAL_WIDTH}}"
            f"{format_amount(totals.net)}"
        )
    return lines

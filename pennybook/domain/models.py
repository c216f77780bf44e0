"""Domain type definitions for pennybook.

These types provide semantic clarity and help with type checking:
- Record: One ledger entry (date, signed amount, category, note)
- Totals: Income, expense and net over a set of records
- Month: Month key in YYYY-MM format
- CategoryName: Free-text category label
"""

from dataclasses import dataclass
from typing import NamedTuple, NewType

# Month is always the first 7 characters of a record date (e.g., "2025-01")
Month = NewType("Month", str)

# Category name, compared case-sensitively
CategoryName = NewType("CategoryName", str)

# Category given to records entered with a blank category
UNCATEGORIZED = CategoryName("Uncategorized")


@dataclass(frozen=True)
class Record:
    """Immutable ledger entry.

    Dates are kept as YYYY-MM-DD strings. Range filters and month bucketing
    compare them as text, which is only chronological for that fixed-width form.
    """

    date: str
    amount: float  # >= 0 is income, < 0 is expense
    category: str
    note: str = ""


class Totals(NamedTuple):
    """Income, expense and net balance over a set of records."""

    income: float
    expense: float
    net: float

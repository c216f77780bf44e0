"""Pure functions for building records and handling amounts.

This module contains the functional core for entry-level operations:
- No I/O operations (no files, no console)
- No side effects
- Parse failures are returned, not raised

Callers decide what a failed parse means: loading a file defaults the
amount to zero, adding a record aborts.
"""

import math

from pennybook.domain.models import UNCATEGORIZED, Record


def parse_amount(text: str) -> tuple[float | None, str | None]:
    """Parse a signed decimal amount.

    Args:
        text: Raw amount text (e.g., "-42.50", "1500", " 3e2 ").

    Returns:
        Tuple of (amount, error):
        - amount: Parsed value, or None if parsing failed
        - error: Error message if parsing failed, None otherwise
    """
    stripped = text.strip()
    if not stripped:
        return None, "Amount is empty"

    try:
        amount = float(stripped)
    except ValueError:
        return None, f"Invalid amount: '{stripped}'"

    if not math.isfinite(amount):
        return None, f"Invalid amount: '{stripped}'"

    return amount, None


def single_line(text: str) -> str:
    """Replace carriage returns and newlines with spaces."""
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def make_record(date: str, amount: float, category: str, note: str = "") -> Record:
    """Create a record as entered by the user.

    A blank category becomes "Uncategorized" and line breaks in category
    and note become spaces, so one entry is always one line in the file.
    This only happens at entry time; records read back from a file keep
    whatever text they have.

    Args:
        date: Record date (YYYY-MM-DD).
        amount: Signed amount.
        category: Category label, may be blank.
        note: Optional note.

    Returns:
        New Record.
    """
    return Record(
        date=date,
        amount=amount,
        category=single_line(category) or UNCATEGORIZED,
        note=single_line(note),
    )


def format_amount_plain(amount: float) -> str:
    """Format an amount for persistence.

    Uses the shortest text that reads back to the same float, without a
    trailing ".0" on whole numbers.

    Args:
        amount: Signed amount.

    Returns:
        Formatted string (e.g., "1500", "-42.5").
    """
    text = repr(float(amount))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def format_amount(amount: float) -> str:
    """Format an amount for display with exactly two decimals.

    Args:
        amount: Signed amount.

    Returns:
        Formatted string (e.g., "-42.50").
    """
    return f"{amount:.2f}"

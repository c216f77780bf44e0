"""Date utilities for pennybook.

Functions for today's date, month ranges and normalizing typed dates.
"""

import calendar
import re
from datetime import date, datetime

import pandas as pd

from pennybook.domain.models import Month

YEAR_FIRST_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d")


def today() -> str:
    """Get the current local date.

    Returns:
        Today's date in YYYY-MM-DD format.
    """
    return date.today().strftime("%Y-%m-%d")


def month_range(month: Month) -> tuple[str, str, str]:
    """Calculate inclusive date bounds and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (from_date, to_date, label) where:
        - from_date: First day of month (YYYY-MM-DD)
        - to_date: Last day of month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")

    Raises:
        ValueError: If month is not a valid YYYY-MM month.
    """
    dt = datetime.strptime(month, "%Y-%m")
    last_day = calendar.monthrange(dt.year, dt.month)[1]
    from_date = dt.strftime("%Y-%m-01")
    to_date = dt.replace(day=last_day).strftime("%Y-%m-%d")
    label = dt.strftime("%B %Y")
    return from_date, to_date, label


def normalize_date(raw_date: str) -> str:
    """Normalize a typed date to ISO format (YYYY-MM-DD).

    Uses pandas.to_datetime so entries like "05/01/2025" or "5 Jan 2025"
    are stored in the fixed-width form the range filters rely on. Text that
    starts with a four-digit year is read year, month, day; anything else is
    read day first.

    Args:
        raw_date: Date as typed by the user.

    Returns:
        Normalized date in YYYY-MM-DD format.

    Raises:
        ValueError: If date cannot be parsed.
    """
    stripped = raw_date.strip()

    # Year first; dayfirst must not swap month and day here
    for fmt in YEAR_FIRST_FORMATS:
        try:
            return datetime.strptime(stripped, fmt).strftime("%Y-%m-%d")
        except ValueError:
            continue

    year_first = bool(re.match(r"\d{4}\D", stripped))
    try:
        parsed_date = pd.to_datetime(stripped, dayfirst=not year_first, yearfirst=year_first)
    except (ValueError, OverflowError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e

    if pd.isna(parsed_date):
        raise ValueError(f"Could not parse date '{raw_date}'")

    return parsed_date.strftime("%Y-%m-%d")

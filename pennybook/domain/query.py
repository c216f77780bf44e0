"""Pure functions for filtering records and computing totals.

This module contains the functional core for querying the ledger:
- No I/O operations (no files, no console)
- No side effects
- Input order is preserved by every filter

Dates are compared as strings. That is chronological only because dates are
stored as fixed-width YYYY-MM-DD text.
"""

from collections.abc import Iterable

from pennybook.domain.models import Month, Record, Totals

MONTH_KEY_LENGTH = 7


def filter_by_date(records: Iterable[Record], from_date: str = "", to_date: str = "") -> list[Record]:
    """Keep records dated within an inclusive range.

    Args:
        records: Records to filter.
        from_date: Lower bound (YYYY-MM-DD), empty for no lower bound.
        to_date: Upper bound (YYYY-MM-DD), empty for no upper bound.

    Returns:
        Matching records in their original order.
    """
    result = []
    for record in records:
        if from_date and record.date < from_date:
            continue
        if to_date and record.date > to_date:
            continue
        result.append(record)
    return result


def filter_by_category(records: Iterable[Record], category: str) -> list[Record]:
    """Keep records whose category matches exactly (case-sensitive).

    Args:
        records: Records to filter.
        category: Category to match.

    Returns:
        Matching records in their original order.
    """
    return [record for record in records if record.category == category]


def apply_filters(
    records: Iterable[Record],
    from_date: str = "",
    to_date: str = "",
    category: str = "",
) -> list[Record]:
    """Apply the date filter, then the category filter if one is given.

    Args:
        records: Records to filter.
        from_date: Lower date bound, empty for none.
        to_date: Upper date bound, empty for none.
        category: Category to match, empty to keep all categories.

    Returns:
        Matching records in their original order.
    """
    filtered = filter_by_date(records, from_date, to_date)
    if category:
        filtered = filter_by_category(filtered, category)
    return filtered


def aggregate_totals(records: Iterable[Record]) -> Totals:
    """Sum income and expense over records.

    Args:
        records: Records to total.

    Returns:
        Totals where expense is positive and net is income minus expense.
    """
    income = 0.0
    expense = 0.0
    for record in records:
        if record.amount >= 0:
            income += record.amount
        else:
            expense += -record.amount
    return Totals(income=income, expense=expense, net=income - expense)


def month_key(date: str) -> Month | None:
    """Get the month key of a date.

    Args:
        date: Record date.

    Returns:
        First seven characters of the date, or None if it is shorter.
    """
    if len(date) < MONTH_KEY_LENGTH:
        return None
    return Month(date[:MONTH_KEY_LENGTH])


def monthly_totals(records: Iterable[Record]) -> dict[Month, Totals]:
    """Bucket records by month and total each bucket.

    Args:
        records: Records to total.

    Returns:
        Dictionary of month key to Totals, in ascending key order.
    """
    buckets: dict[Month, list[Record]] = {}
    for record in records:
        key = month_key(record.date)
        if key is None:
            continue
        buckets.setdefault(key, []).append(record)

    return {key: aggregate_totals(buckets[key]) for key in sorted(buckets)}

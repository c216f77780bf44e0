"""Domain models and types for pennybook.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger logic separated from files and console
"""

from pennybook.domain.models import UNCATEGORIZED, CategoryName, Month, Record, Totals

__all__ = ["Record", "Totals", "Month", "CategoryName", "UNCATEGORIZED"]

"""Ledger store layer - provides persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from pennybook.store.ledger import Ledger
from pennybook.store.paths import get_data_path
from pennybook.store.records import append_and_persist, export_records, load_records, save_records

__all__ = [
    # Paths
    "get_data_path",
    # Records
    "append_and_persist",
    "export_records",
    "load_records",
    "save_records",
    # Ledger
    "Ledger",
]

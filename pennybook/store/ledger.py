"""In-memory ledger backed by the ledger file."""

from pathlib import Path

from pennybook.domain.models import Record
from pennybook.store.records import append_and_persist, export_records, load_records


class Ledger:
    """Owns the record sequence for one session and its backing file.

    Records are only ever appended. Every append rewrites the whole file.
    """

    def __init__(self, data_path: Path, records: list[Record] | None = None) -> None:
        self.data_path = data_path
        self._records: list[Record] = list(records) if records else []

    @classmethod
    def open(cls, data_path: Path) -> "Ledger":
        """Load a ledger from its file (missing file gives an empty ledger)."""
        return cls(data_path, load_records(data_path))

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def append_and_persist(self, record: Record) -> None:
        """Append a record and rewrite the file.

        Raises:
            OSError: If the file cannot be written. The record stays appended
                in memory.
        """
        append_and_persist(self._records, record, self.data_path)

    def export(self, export_path: str | Path) -> int:
        """Export every record, not just a filtered view.

        Returns:
            Number of records written.

        Raises:
            ValueError: If the filename is empty.
            OSError: If the file cannot be written.
        """
        return export_records(self._records, export_path)

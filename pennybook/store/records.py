"""Ledger file read and write functions.

The file is read whole and rewritten whole. Saving truncates the file and
writes it again in place, so a crash mid-write can leave it truncated.
"""

from collections.abc import Iterable
from pathlib import Path

from pennybook.domain.codec import HEADER, decode_record, encode_record, is_header
from pennybook.domain.models import Record
from pennybook.logging_setup import get_logger
from pennybook.store.paths import get_data_path

logger = get_logger(__name__)


def _parse_lines(lines: Iterable[str]) -> list[Record]:
    """Parse ledger lines, dropping the header and malformed lines.

    Args:
        lines: File lines, terminators included or not.

    Returns:
        Records in file order.
    """
    records: list[Record] = []

    for line_no, raw_line in enumerate(lines, 1):
        line = raw_line.rstrip("\r\n")

        # Header-less legacy files start with data
        if line_no == 1 and is_header(line):
            continue

        if not line:
            continue

        record = decode_record(line)
        if record is None:
            logger.debug("Skipping malformed line %d: %r", line_no, line)
            continue

        records.append(record)

    return records


def load_records(data_path: Path | None = None) -> list[Record]:
    """Load every record from the ledger file.

    Never raises: a file that is missing or cannot be opened is an empty
    ledger, malformed lines are skipped and bad amounts read as 0.0.

    Args:
        data_path: Path to the ledger file. If None, uses default location.

    Returns:
        List of records in file order.
    """
    if data_path is None:
        data_path = get_data_path()

    try:
        with open(data_path, encoding="utf-8", errors="replace", newline="") as f:
            records = _parse_lines(f)
    except FileNotFoundError:
        logger.debug("No ledger file at %s, starting empty", data_path)
        return []
    except OSError as e:
        logger.warning("Could not read %s, starting empty: %s", data_path, e)
        return []

    logger.debug("Loaded %d records from %s", len(records), data_path)
    return records


def _write_records(records: Iterable[Record], path: Path) -> int:
    """Write the header and one line per record, replacing the file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(HEADER + "\n")
        for record in records:
            f.write(encode_record(record) + "\n")
            count += 1
    return count


def save_records(records: Iterable[Record], data_path: Path | None = None) -> None:
    """Rewrite the ledger file with the given records.

    Args:
        records: Records to write, in order.
        data_path: Path to the ledger file. If None, uses default location.

    Raises:
        OSError: If the file cannot be written.
    """
    if data_path is None:
        data_path = get_data_path()

    count = _write_records(records, data_path)
    logger.debug("Saved %d records to %s", count, data_path)


def append_and_persist(records: list[Record], record: Record, data_path: Path | None = None) -> None:
    """Append a record to the list in place, then rewrite the ledger file.

    Args:
        records: In-memory records, mutated.
        record: New record.
        data_path: Path to the ledger file. If None, uses default location.

    Raises:
        OSError: If the file cannot be written.
    """
    records.append(record)
    save_records(records, data_path)


def export_records(records: Iterable[Record], export_path: str | Path) -> int:
    """Write records to another file in the ledger format.

    Args:
        records: Records to export.
        export_path: Destination filename.

    Returns:
        Number of records written.

    Raises:
        ValueError: If the filename is empty.
        OSError: If the file cannot be written.
    """
    if not str(export_path).strip():
        raise ValueError("Export filename is empty")

    path = Path(export_path).expanduser()
    count = _write_records(records, path)
    logger.info("Exported %d records to %s", count, path)
    return count

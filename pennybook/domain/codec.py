"""Line codec for the ledger file.

One record per line, four comma-delimited fields: date, amount, category,
note. Fields holding a comma or a double quote are wrapped in quotes with
embedded quotes doubled.

Decoding treats every quote as a toggle of the quoted-span state, except that
a doubled quote inside a quoted span stands for one literal quote. That makes
encode_record and decode_line inverse for every field value.
"""

from pennybook.domain.models import Record
from pennybook.domain.records import format_amount_plain, parse_amount

DELIMITER = ","
QUOTE = '"'
HEADER = "date,amount,category,note"
FIELD_COUNT = 4


def decode_line(line: str) -> list[str]:
    """Split a line into fields on delimiters outside quoted spans.

    Args:
        line: One line of text without its line terminator.

    Returns:
        List of field strings, always at least one.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quote = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == QUOTE:
            if in_quote and line[i + 1 : i + 2] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quote = not in_quote
        elif char == DELIMITER and not in_quote:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def encode_field(value: str) -> str:
    """Quote a field if it contains the delimiter or a quote.

    Args:
        value: Raw field text.

    Returns:
        The value unchanged, or quoted with embedded quotes doubled.
    """
    if DELIMITER not in value and QUOTE not in value:
        return value
    return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE


def encode_record(record: Record) -> str:
    """Encode a record as one line (no terminator).

    Args:
        record: Record to encode.

    Returns:
        Delimited line with the four fields in order.
    """
    return DELIMITER.join(
        [
            encode_field(record.date),
            format_amount_plain(record.amount),
            encode_field(record.category),
            encode_field(record.note),
        ]
    )


def decode_record(line: str) -> Record | None:
    """Decode a data line into a record.

    Args:
        line: One data line without its line terminator.

    Returns:
        Record, or None if the line has fewer than four fields. An amount
        that does not parse becomes 0.0.
    """
    parts = decode_line(line)
    if len(parts) < FIELD_COUNT:
        return None

    amount, _ = parse_amount(parts[1])
    return Record(
        date=parts[0],
        amount=amount if amount is not None else 0.0,
        category=parts[2],
        note=parts[3],
    )


def is_header(line: str) -> bool:
    """Check whether a line is the header line.

    Args:
        line: First line of a ledger file.

    Returns:
        True if the line contains the header marker.
    """
    return HEADER in line

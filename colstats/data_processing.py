"""
Reads delimited text records and turns one or two columns into numbers.
"""

# Loading summary: the record source is read fully into memory, the optional
# header row is dropped, and each remaining record contributes one float per
# requested column, in record order. Bad fields are rejected, never skipped.

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from .errors import (
    FieldNotFoundError,
    ParseError,
    ResourceUnavailableError,
)
from .fields import DEFAULT_DELIMITER, count_fields, extract_field

logger = logging.getLogger(__name__)


def read_records(filepath: str, encoding: str = "utf-8") -> List[str]:
    """
    Read every line of a text file.

    Args:
        filepath (str): Path to the delimited text file.
        encoding (str): Text encoding of the file.

    Returns:
        list[str]: Lines in file order, without line terminators.

    Raises:
        ResourceUnavailableError: If the file cannot be opened or decoded.
    """
    try:
        with open(filepath, "r", encoding=encoding) as fh:
            # records end at newlines only, not at form feeds or \x85
            records = [line.rstrip("\r\n") for line in fh]
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceUnavailableError(
            f"Cannot read records from {filepath!r}: {exc}"
        ) from exc

    logger.debug("Read %d records from %s", len(records), filepath)
    return records


def parse_number(text: str) -> float:
    """Parse field text into a finite float.

    Surrounding whitespace is ignored. ``nan`` and ``inf`` spellings are
    rejected so they cannot leak into the statistics.
    """
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise ParseError(f"Not a number: {text!r}") from exc
    if not math.isfinite(value):
        raise ParseError(f"Not a finite number: {text!r}")
    return value


def _data_records(records: Sequence[str], has_header: bool):
    """Yield ``(line_number, record)`` for the records after the header."""
    first = 1 if has_header else 0
    for offset, record in enumerate(records[first:], start=first + 1):
        yield offset, record


def load_column(
    records: Sequence[str],
    has_header: bool,
    column_index: int,
    delimiter: str = DEFAULT_DELIMITER,
) -> List[float]:
    """Extract one numeric column from delimited records.

    Args:
        records: Lines of delimited text.
        has_header: Drop the first record before loading. A header-only input
            produces an empty list.
        column_index: 0-based field position of the column.
        delimiter: Single field separator character.

    Returns:
        list[float]: One value per data record, in record order.

    Raises:
        FieldNotFoundError: If a record has too few fields.
        ParseError: If a field is not a finite number.
    """
    values = []
    for line_number, record in _data_records(records, has_header):
        values.append(_load_value(record, line_number, column_index, delimiter))

    logger.debug("Loaded %d values from column %d", len(values), column_index)
    return values


def load_columns(
    records: Sequence[str],
    has_header: bool,
    x_index: int,
    y_index: int,
    delimiter: str = DEFAULT_DELIMITER,
) -> Tuple[List[float], List[float]]:
    """Extract two index-aligned numeric columns from the same records."""
    xvalues = []
    yvalues = []
    for line_number, record in _data_records(records, has_header):
        xvalues.append(_load_value(record, line_number, x_index, delimiter))
        yvalues.append(_load_value(record, line_number, y_index, delimiter))

    logger.debug(
        "Loaded %d value pairs from columns %d and %d",
        len(xvalues),
        x_index,
        y_index,
    )
    return xvalues, yvalues


def header_names(
    records: Sequence[str], delimiter: str = DEFAULT_DELIMITER
) -> List[str]:
    """Return the stripped field names of the first record.

    Raises:
        ValueError: If ``delimiter`` is not exactly one character.
    """
    if not records:
        return []
    header = records[0]
    return [
        extract_field(header, delimiter, i).strip()
        for i in range(count_fields(header, delimiter))
    ]


def _load_value(record, line_number, column_index, delimiter):
    try:
        text = extract_field(record, delimiter, column_index)
    except FieldNotFoundError as exc:
        raise FieldNotFoundError(f"Line {line_number}: {exc}") from exc
    try:
        return parse_number(text)
    except ParseError as exc:
        raise ParseError(
            f"Line {line_number}, column {column_index}: {exc}"
        ) from exc

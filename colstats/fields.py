"""Locate fields inside single-character-delimited text records."""

from __future__ import annotations

from .errors import FieldNotFoundError

DEFAULT_DELIMITER = ","


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(
            f"Delimiter must be exactly one character, got {delimiter!r}"
        )


def count_fields(record: str, delimiter: str = DEFAULT_DELIMITER) -> int:
    """Return the number of fields in ``record``.

    A record without any delimiter holds one field, and a trailing delimiter
    adds an empty trailing field.
    """
    _check_delimiter(delimiter)
    return record.count(delimiter) + 1


def extract_field(record: str, delimiter: str, index: int) -> str:
    """Return the raw text of the ``index``-th field of ``record``.

    Args:
        record (str): One line of delimited text, without its line terminator.
        delimiter (str): Single field separator character.
        index (int): 0-based field position.

    Returns:
        str: Text between the ``index``-th and ``(index + 1)``-th delimiter,
        or up to the end of the record for the last field.

    Raises:
        ValueError: If ``delimiter`` is not exactly one character.
        FieldNotFoundError: If ``index`` is negative or the record has fewer
            than ``index + 1`` fields.

    Note:
        The record is scanned once from the left; only the returned substring
        is allocated.
    """
    _check_delimiter(delimiter)
    if index < 0:
        raise FieldNotFoundError(f"Field index must be >= 0, got {index}")

    start = 0
    for seen in range(index):
        pos = record.find(delimiter, start)
        if pos == -1:
            raise FieldNotFoundError(
                f"Field {index} requested but record has only {seen + 1} "
                f"field(s): {record!r}"
            )
        start = pos + 1

    end = record.find(delimiter, start)
    if end == -1:
        return record[start:]
    return record[start:end]

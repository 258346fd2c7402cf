"""Exception types raised while loading columns and computing statistics."""

from __future__ import annotations


class ColumnStatsError(Exception):
    """Base class for all colstats failures."""


class FieldNotFoundError(ColumnStatsError, IndexError):
    """Requested field index exceeds the fields present in a record."""


class ParseError(ColumnStatsError, ValueError):
    """A field's text is not a finite number."""


class LengthMismatchError(ColumnStatsError, ValueError):
    """A paired statistic was given sequences of unequal length."""


class ResourceUnavailableError(ColumnStatsError, OSError):
    """The record source could not be read."""

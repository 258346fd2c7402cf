"""Define standardized column names for summary DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized column labels.

    Attributes:
        statistic: Name of the statistic in a summary row (for example
            ``"Mean"`` or ``"Correlation"``).
        column: Which input column(s) the statistic describes.
        value: Statistic value, rounded to 4 decimals.
        x: Input values fed to the fitted line.
        prediction: Predicted values, ``slope * x + intercept``.
    """

    statistic: str = "Statistic"
    column: str = "Column"
    value: str = "Value"
    x: str = "x"
    prediction: str = "Predicted y"


COLUMNS = SummaryColumns()

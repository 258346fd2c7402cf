"""
Statistical utilities for numeric columns.

This subpackage provides the single-pass statistics computed over one or two
columns. All functions operate on plain sequences of floats; no parsing or
file handling is included.

Modules:
    accumulator:
        Running-sum fold shared by every statistic, the 4-decimal
        half-to-even rounding policy, mean and population standard deviation.

    regression:
        Least-squares slope and intercept, Pearson correlation, and the
        fitted-line predictor.

Design Principle:
    This subpackage has no dependencies on data loading, output or plotting
    modules. Degenerate inputs (zero denominators) evaluate to ``0.0`` rather
    than raising.
"""

from .accumulator import ROUND_DIGITS, Sums, accumulate, mean, round_statistic, stddev
from .regression import (
    FittedModel,
    correlation,
    fit_line,
    predict,
    regression_intercept,
    regression_slope,
)

__all__ = [
    "ROUND_DIGITS",
    "Sums",
    "accumulate",
    "round_statistic",
    "mean",
    "stddev",
    "regression_slope",
    "regression_intercept",
    "correlation",
    "predict",
    "FittedModel",
    "fit_line",
]

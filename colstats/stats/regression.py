"""Provide least-squares line fitting, correlation and prediction.

This module supports:
- the regression slope and intercept of y on x,
- the Pearson correlation coefficient, and
- mapping new inputs through a fitted line.

Slope, intercept and correlation are rounded to 4 decimals and evaluate to
``0.0`` when their denominator is exactly zero (for example, when every x
value is identical).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .accumulator import accumulate, round_statistic, safe_ratio


def regression_slope(xvalues: Sequence[float], yvalues: Sequence[float]) -> float:
    """Return the OLS slope ``(n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)``.

    Args:
        xvalues: Predictor values.
        yvalues: Response values, index-aligned with ``xvalues``.

    Returns:
        float: Slope rounded to 4 decimals, or ``0.0`` when the x values have
        no spread.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    sums = accumulate(xvalues, yvalues)
    return round_statistic(safe_ratio(sums.sxy, sums.sxx))


def regression_intercept(
    xvalues: Sequence[float], yvalues: Sequence[float]
) -> float:
    """Return the OLS intercept ``(Sy*Sxx - Sx*Sxy) / (n*Sxx - Sx^2)``.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    sums = accumulate(xvalues, yvalues)
    return round_statistic(safe_ratio(sums.intercept_numerator, sums.sxx))


def correlation(xvalues: Sequence[float], yvalues: Sequence[float]) -> float:
    """Return the Pearson correlation coefficient of two sequences.

    Returns ``0.0`` when either sequence is constant or the input is empty.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    sums = accumulate(xvalues, yvalues)
    denominator = math.sqrt(max(sums.sxx * sums.syy, 0.0))
    return round_statistic(safe_ratio(sums.sxy, denominator))


def predict(slope: float, intercept: float, inputs: Sequence[float]) -> np.ndarray:
    """Evaluate ``slope * x + intercept`` for every input, in order.

    Predictions are not rounded.
    """
    x_arr = np.asarray(inputs, dtype=float)
    return slope * x_arr + intercept


@dataclass(frozen=True)
class FittedModel:
    """Rounded slope and intercept of a fitted line ``y = slope*x + intercept``."""

    slope: float
    intercept: float

    def predict(self, inputs: Sequence[float]) -> np.ndarray:
        return predict(self.slope, self.intercept, inputs)


def fit_line(xvalues: Sequence[float], yvalues: Sequence[float]) -> FittedModel:
    """Fit slope and intercept from a single accumulation pass."""
    sums = accumulate(xvalues, yvalues)
    return FittedModel(
        slope=round_statistic(safe_ratio(sums.sxy, sums.sxx)),
        intercept=round_statistic(safe_ratio(sums.intercept_numerator, sums.sxx)),
    )

"""Single-pass running sums shared by every statistic.

Each statistic is one left-to-right fold over its input that produces a
:class:`Sums` record, followed by a closed-form formula. Results are rounded
to ``ROUND_DIGITS`` decimal places with ``numpy.round`` (decimal ties to
even), and a formula whose denominator is exactly zero evaluates to ``0.0``.

The record keeps running means and centered second moments (Welford updates)
instead of raw power sums. The textbook quantities follow directly:

    n*sum(x^2) - sum(x)^2       == n * m2_x
    n*sum(y^2) - sum(y)^2       == n * m2_y
    n*sum(xy) - sum(x)*sum(y)   == n * c_xy

so a column of identical values gives an exact zero denominator instead of a
cancellation residue.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional, Sequence

import numpy as np

from ..errors import LengthMismatchError

ROUND_DIGITS = 4


@dataclass(frozen=True)
class Sums:
    """Running sums over one or two index-aligned sequences.

    Attributes:
        n: Number of observations.
        mean_x: Running mean of x.
        mean_y: Running mean of y (0 for single-sequence input).
        m2_x: Sum of squared deviations of x from its mean.
        m2_y: Sum of squared deviations of y from its mean.
        c_xy: Sum of co-deviations of x and y.
    """

    n: int = 0
    mean_x: float = 0.0
    mean_y: float = 0.0
    m2_x: float = 0.0
    m2_y: float = 0.0
    c_xy: float = 0.0

    def add(self, x: float, y: float = 0.0) -> "Sums":
        n = self.n + 1
        dx = x - self.mean_x
        dy = y - self.mean_y
        mean_x = self.mean_x + dx / n
        mean_y = self.mean_y + dy / n
        return Sums(
            n=n,
            mean_x=mean_x,
            mean_y=mean_y,
            m2_x=self.m2_x + dx * (x - mean_x),
            m2_y=self.m2_y + dy * (y - mean_y),
            c_xy=self.c_xy + dx * (y - mean_y),
        )

    @property
    def sum_x(self) -> float:
        return self.n * self.mean_x

    @property
    def sxx(self) -> float:
        """``n*sum(x^2) - sum(x)^2``, the shared regression denominator."""
        return self.n * self.m2_x

    @property
    def syy(self) -> float:
        """``n*sum(y^2) - sum(y)^2``."""
        return self.n * self.m2_y

    @property
    def sxy(self) -> float:
        """``n*sum(xy) - sum(x)*sum(y)``."""
        return self.n * self.c_xy

    @property
    def intercept_numerator(self) -> float:
        """``sum(y)*sum(x^2) - sum(x)*sum(xy)``."""
        return self.n * (self.mean_y * self.m2_x - self.mean_x * self.c_xy)


def check_paired(xvalues: Sequence[float], yvalues: Sequence[float]) -> None:
    """Raise :class:`LengthMismatchError` unless both sequences align."""
    if len(xvalues) != len(yvalues):
        raise LengthMismatchError(
            f"Paired statistics need equal-length inputs, got {len(xvalues)} "
            f"x values and {len(yvalues)} y values"
        )


def accumulate(
    xvalues: Iterable[float], yvalues: Optional[Iterable[float]] = None
) -> Sums:
    """Fold one sequence, or two equal-length sequences, into :class:`Sums`.

    Raises:
        LengthMismatchError: If ``yvalues`` is given with a different length.
    """
    if yvalues is None:
        return reduce(lambda acc, x: acc.add(float(x)), xvalues, Sums())

    xvalues = list(xvalues)
    yvalues = list(yvalues)
    check_paired(xvalues, yvalues)
    return reduce(
        lambda acc, pair: acc.add(float(pair[0]), float(pair[1])),
        zip(xvalues, yvalues),
        Sums(),
    )


def round_statistic(value: float, ndigits: int = ROUND_DIGITS) -> float:
    """Round a statistic half-to-even at ``ndigits`` decimals.

    ``numpy.round`` scales by ``10**ndigits`` before rounding, so decimal ties
    such as ``0.00025`` go to the even digit. ``-0.0`` becomes ``0.0``.
    """
    return float(np.round(float(value), ndigits)) + 0.0


def safe_ratio(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator``, or ``0.0`` for a zero denominator."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean rounded to 4 decimals; ``0.0`` for empty input."""
    sums = accumulate(values)
    return round_statistic(safe_ratio(sums.sum_x, sums.n))


def stddev(values: Iterable[float]) -> float:
    """Population standard deviation, ``sqrt(sum((x - mean)^2) / n)``.

    Divides by ``n``, not ``n - 1``. Empty input gives ``0.0``, and a constant
    sequence gives exactly ``0.0``.
    """
    sums = accumulate(values)
    variance = safe_ratio(sums.m2_x, sums.n)
    return round_statistic(math.sqrt(max(variance, 0.0)))

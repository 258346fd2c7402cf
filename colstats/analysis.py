"""
Summary tables built from one or two numeric columns.

The summary always reports the mean and population standard deviation of
each column. When a second column is given, the regression slope and
intercept of y on x, the Pearson correlation and the pair count are added.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

import pandas as pd

from .schema import COLUMNS
from .stats import correlation, fit_line, mean, stddev
from .stats.accumulator import check_paired
from .stats.regression import FittedModel

logger = logging.getLogger(__name__)


def summarize_columns(
    xvalues: Sequence[float], yvalues: Optional[Sequence[float]] = None
) -> Dict[str, float]:
    """Compute every statistic available for the given column(s).

    Args:
        xvalues: Values of the first (predictor) column.
        yvalues: Optional values of the second (response) column,
            index-aligned with ``xvalues``.

    Returns:
        dict[str, float]: Keys ``n``, ``mean_x``, ``stddev_x`` and, for paired
        input, ``mean_y``, ``stddev_y``, ``slope``, ``intercept`` and
        ``correlation``.

    Raises:
        LengthMismatchError: If the two columns differ in length.
    """
    if yvalues is not None:
        check_paired(xvalues, yvalues)

    summary = {
        "n": len(xvalues),
        "mean_x": mean(xvalues),
        "stddev_x": stddev(xvalues),
    }
    if yvalues is None:
        logger.info("Summarized %d values", summary["n"])
        return summary

    model = fit_line(xvalues, yvalues)
    summary.update(
        {
            "mean_y": mean(yvalues),
            "stddev_y": stddev(yvalues),
            "slope": model.slope,
            "intercept": model.intercept,
            "correlation": correlation(xvalues, yvalues),
        }
    )
    logger.info(
        "Summarized %d pairs: slope=%s intercept=%s r=%s",
        summary["n"],
        summary["slope"],
        summary["intercept"],
        summary["correlation"],
    )
    return summary


def create_summary_dataframe(
    summary: Dict[str, float], x_label: str = "x", y_label: str = "y"
) -> pd.DataFrame:
    """Lay a summary dict out as one row per statistic."""
    pair_label = f"{y_label} ~ {x_label}"
    layout = [
        ("n", "Count", x_label),
        ("mean_x", "Mean", x_label),
        ("stddev_x", "Standard deviation", x_label),
        ("mean_y", "Mean", y_label),
        ("stddev_y", "Standard deviation", y_label),
        ("slope", "Regression slope", pair_label),
        ("intercept", "Regression intercept", pair_label),
        ("correlation", "Correlation", pair_label),
    ]
    rows = [
        {
            COLUMNS.statistic: name,
            COLUMNS.column: column,
            COLUMNS.value: summary[key],
        }
        for key, name, column in layout
        if key in summary
    ]
    return pd.DataFrame(rows, columns=[COLUMNS.statistic, COLUMNS.column, COLUMNS.value])


def create_predictions_dataframe(
    model: FittedModel, inputs: Sequence[float]
) -> pd.DataFrame:
    """Tabulate inputs next to their predictions from ``model``."""
    return pd.DataFrame(
        {
            COLUMNS.x: [float(v) for v in inputs],
            COLUMNS.prediction: model.predict(inputs),
        }
    )


def print_statistics(summary_df: pd.DataFrame) -> None:
    """Print the summary table to stdout."""
    print("\nColumn statistics")
    print("=" * 40)
    print(summary_df.to_string(index=False))

"""Scatter plots with the fitted regression line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .stats.accumulator import check_paired
from .stats.regression import FittedModel

logger = logging.getLogger(__name__)

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    LEGEND_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    MARKERSIZE: float = 6.0
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()


def setup_plot_style() -> None:
    """Apply the shared rcParams once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE,
            "axes.titlesize": STYLE.TITLE_FONTSIZE,
            "axes.labelsize": STYLE.LABEL_FONTSIZE,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "savefig.dpi": FIGURE_DPI,
        }
    )
    _STYLE_STATE["initialized"] = True


def plot_regression(
    xvalues: Sequence[float],
    yvalues: Sequence[float],
    model: FittedModel,
    output_dir: str = "output",
    x_label: str = "x",
    y_label: str = "y",
) -> str:
    """Plot paired observations and the fitted line, saved as a PNG.

    Args:
        xvalues: Predictor column.
        yvalues: Response column, index-aligned with ``xvalues``.
        model: Fitted slope and intercept to draw.
        output_dir: Directory for ``regression.png``; created when missing.
        x_label: Axis label for x.
        y_label: Axis label for y.

    Returns:
        str: Path of the saved figure.

    Raises:
        LengthMismatchError: If the columns differ in length.
    """
    check_paired(xvalues, yvalues)
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    x_arr = np.asarray(xvalues, dtype=float)
    y_arr = np.asarray(yvalues, dtype=float)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.plot(x_arr, y_arr, "o", label="Observations")
    if x_arr.size:
        x_line = np.linspace(x_arr.min(), x_arr.max(), 100)
        ax.plot(
            x_line,
            model.predict(x_line),
            "-",
            label=f"y = {model.slope:g}x + {model.intercept:g}",
        )
    ax.set_xlabel(x_label)
    ax.set_ylabel(y_label)
    ax.set_title(f"{y_label} vs {x_label}")
    ax.grid(True, alpha=STYLE.GRID_ALPHA)
    ax.legend()
    fig.tight_layout()

    path = os.path.join(output_dir, "regression.png")
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved regression plot to %s", path)
    return path

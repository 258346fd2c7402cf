"""Write summary and prediction tables to CSV files."""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

import pandas as pd

DEFAULT_OUTPUT_DIR = "output"

logger = logging.getLogger(__name__)


def save_data_to_csv(
    summary_df: pd.DataFrame,
    predictions_df: Optional[pd.DataFrame] = None,
    output_dir: str = DEFAULT_OUTPUT_DIR,
) -> Tuple[str, Optional[str]]:
    """Save the statistics summary and optional predictions to CSV files.

    Args:
        summary_df (pandas.DataFrame): Output from
            ``create_summary_dataframe``.
        predictions_df (pandas.DataFrame, optional): Output from
            ``create_predictions_dataframe``.
        output_dir (str): Directory where CSV outputs are written; created
            when missing.

    Returns:
        tuple[str, str | None]: Paths to ``statistical_summary.csv`` and
        ``predictions.csv`` (``None`` when no predictions were given).
    """
    os.makedirs(output_dir, exist_ok=True)

    summary_path = os.path.join(output_dir, "statistical_summary.csv")
    summary_df.to_csv(summary_path, index=False)
    logger.info("Saved statistical summary to %s", summary_path)

    predictions_path = None
    if predictions_df is not None:
        predictions_path = os.path.join(output_dir, "predictions.csv")
        predictions_df.to_csv(predictions_path, index=False)
        logger.info("Saved predictions to %s", predictions_path)

    return summary_path, predictions_path

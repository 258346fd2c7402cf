"""Tests for CSV export of summary and prediction tables."""

import os

import pandas as pd

from colstats.analysis import (
    create_predictions_dataframe,
    create_summary_dataframe,
    summarize_columns,
)
from colstats.output import save_data_to_csv
from colstats.stats import fit_line


def test_save_summary_and_predictions(tmp_path):
    xs, ys = [10.0, 20.0, 30.0], [90.0, 85.0, 80.0]
    summary_df = create_summary_dataframe(summarize_columns(xs, ys))
    predictions_df = create_predictions_dataframe(fit_line(xs, ys), [40.0])

    out_dir = tmp_path / "nested" / "out"
    summary_path, predictions_path = save_data_to_csv(
        summary_df, predictions_df, output_dir=str(out_dir)
    )

    assert summary_path.endswith("statistical_summary.csv")
    reloaded = pd.read_csv(summary_path)
    assert len(reloaded) == len(summary_df)
    assert pd.read_csv(predictions_path)["Predicted y"].tolist() == [75.0]


def test_save_without_predictions(tmp_path):
    summary_df = create_summary_dataframe(summarize_columns([1.0, 2.0]))
    summary_path, predictions_path = save_data_to_csv(
        summary_df, output_dir=str(tmp_path)
    )
    assert predictions_path is None
    assert os.path.exists(summary_path)
    assert not os.path.exists(tmp_path / "predictions.csv")

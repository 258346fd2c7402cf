import numpy as np
import pytest

from colstats.analysis import (
    create_predictions_dataframe,
    create_summary_dataframe,
    print_statistics,
    summarize_columns,
)
from colstats.errors import LengthMismatchError
from colstats.stats import FittedModel


def test_summarize_single_column():
    summary = summarize_columns([10.0, 20.0, 30.0])
    assert summary == {"n": 3, "mean_x": 20.0, "stddev_x": 8.165}


def test_summarize_paired_columns():
    summary = summarize_columns([10.0, 20.0, 30.0], [90.0, 85.0, 80.0])
    assert summary["slope"] == -0.5
    assert summary["intercept"] == 95.0
    assert summary["correlation"] == -1.0
    assert summary["mean_y"] == 85.0
    assert summary["n"] == 3


def test_summarize_rejects_misaligned_columns():
    with pytest.raises(LengthMismatchError):
        summarize_columns([1.0, 2.0], [1.0])


def test_create_summary_dataframe_rows_and_columns():
    summary = summarize_columns([10.0, 20.0, 30.0], [90.0, 85.0, 80.0])
    df = create_summary_dataframe(summary, x_label="hours", y_label="score")

    assert list(df.columns) == ["Statistic", "Column", "Value"]
    assert len(df) == 8
    slope_row = df[df["Statistic"] == "Regression slope"].iloc[0]
    assert slope_row["Column"] == "score ~ hours"
    assert np.isclose(slope_row["Value"], -0.5)


def test_single_column_summary_has_no_regression_rows():
    df = create_summary_dataframe(summarize_columns([1.0, 2.0]))
    assert set(df["Statistic"]) == {"Count", "Mean", "Standard deviation"}


def test_create_predictions_dataframe():
    df = create_predictions_dataframe(FittedModel(-0.5, 95.0), [10, 20, 30])
    assert df["x"].tolist() == [10.0, 20.0, 30.0]
    assert np.allclose(df["Predicted y"], [90.0, 85.0, 80.0])


def test_print_statistics(capsys):
    df = create_summary_dataframe(summarize_columns([1.0, 3.0]))
    print_statistics(df)
    out = capsys.readouterr().out
    assert "Column statistics" in out
    assert "Standard deviation" in out

import os

import pytest

from colstats.errors import LengthMismatchError
from colstats.plotting import plot_regression
from colstats.stats import FittedModel, fit_line


def test_plot_regression(tmp_path):
    xs, ys = [10.0, 20.0, 30.0], [90.0, 85.0, 80.0]
    out = plot_regression(xs, ys, fit_line(xs, ys), output_dir=str(tmp_path))
    assert out.endswith("regression.png")
    assert os.path.exists(out)


def test_plot_regression_rejects_misaligned_columns(tmp_path):
    with pytest.raises(LengthMismatchError):
        plot_regression([1.0, 2.0], [1.0], FittedModel(0.0, 0.0), str(tmp_path))

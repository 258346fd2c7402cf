import numpy as np
import pytest

from colstats.errors import LengthMismatchError
from colstats.stats import (
    FittedModel,
    correlation,
    fit_line,
    predict,
    regression_intercept,
    regression_slope,
)

X = [10.0, 20.0, 30.0]
Y = [90.0, 85.0, 80.0]


def test_example_slope_and_intercept():
    assert regression_slope(X, Y) == -0.5
    assert regression_intercept(X, Y) == 95.0


def test_example_predictions():
    out = predict(-0.5, 95.0, X)
    assert np.allclose(out, [90.0, 85.0, 80.0])


def test_fit_line_matches_separate_statistics():
    model = fit_line(X, Y)
    assert model == FittedModel(slope=-0.5, intercept=95.0)
    assert np.allclose(model.predict([0.0, 40.0]), [95.0, 75.0])


def test_two_points_are_reproduced():
    xs = [1.5, 4.0]
    ys = [2.0, -3.0]
    model = fit_line(xs, ys)
    assert np.allclose(model.predict(xs), ys, atol=1e-4)


def test_correlation_with_itself_and_negation():
    xs = [1.0, 2.5, 3.0, 7.25, -4.0]
    assert correlation(xs, xs) == 1.0
    assert correlation(xs, [-v for v in xs]) == -1.0


def test_constant_x_is_degenerate_not_an_error():
    xs = [0.1, 0.1, 0.1, 0.1]
    ys = [1.0, 2.0, 3.0, 4.0]
    assert regression_slope(xs, ys) == 0.0
    assert regression_intercept(xs, ys) == 0.0
    assert correlation(xs, ys) == 0.0


def test_constant_y_correlation_is_zero():
    assert correlation([1.0, 2.0, 3.0], [5.0, 5.0, 5.0]) == 0.0


def test_empty_pairs_are_degenerate():
    assert regression_slope([], []) == 0.0
    assert regression_intercept([], []) == 0.0
    assert correlation([], []) == 0.0


@pytest.mark.parametrize(
    "func", [regression_slope, regression_intercept, correlation, fit_line]
)
def test_length_mismatch_rejected(func):
    with pytest.raises(LengthMismatchError, match="equal-length"):
        func([1.0, 2.0, 3.0], [1.0, 2.0])


def test_predict_preserves_order_and_length():
    out = predict(2.0, 1.0, [3.0, -1.0, 0.0, 10.0])
    assert out.tolist() == [7.0, -1.0, 1.0, 21.0]
    assert predict(2.0, 1.0, []).size == 0


def test_predict_does_not_round():
    out = predict(0.3333, 0.0, [1.0 / 3.0])
    assert out[0] == pytest.approx(0.3333 / 3.0)


def test_agrees_with_scipy_linregress():
    stats = pytest.importorskip("scipy.stats")
    rng = np.random.default_rng(7)
    xs = rng.uniform(0, 50, size=40)
    ys = 3.2 * xs - 11.0 + rng.normal(0, 4.0, size=40)

    ref = stats.linregress(xs, ys)
    assert regression_slope(xs, ys) == pytest.approx(ref.slope, abs=1e-4)
    assert regression_intercept(xs, ys) == pytest.approx(ref.intercept, abs=1e-4)
    assert correlation(xs, ys) == pytest.approx(ref.rvalue, abs=1e-4)

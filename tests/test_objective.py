import numpy as np
import pytest

from linfit import Dataset, DimensionMismatchError, EmptyDatasetError
from linfit.fitting import distance, make_objective, predict, residuals


def test_predict_straight_line(small_data):
    np.testing.assert_allclose(predict([2.0, 2.0], small_data), [4.0, 6.0, 8.0, 10.0])


def test_residuals_are_observed_minus_predicted(small_data):
    np.testing.assert_allclose(residuals([2.0, 2.0], small_data), [0.2, 0.1, -0.1, 0.2])


@pytest.mark.parametrize("params", [[1.0, 2.0, 3.0], [1.0], []])
def test_predict_rejects_wrong_parameter_count(small_data, params):
    with pytest.raises(DimensionMismatchError):
        predict(params, small_data)


def test_distance_is_rms_of_residuals(small_data):
    expected = np.sqrt(np.mean(np.array([0.2, 0.1, -0.1, 0.2])**2))
    assert distance([2.0, 2.0], small_data) == pytest.approx(expected)


def test_distance_is_zero_for_exact_fit(exact_line):
    assert distance([1.0, 2.0], exact_line) == 0.0


@pytest.mark.parametrize("params", [[1.0, 2.001], [0.0, 0.0], [-3.0, 5.0], [1.0 + 1e-9, 2.0]])
def test_distance_is_positive_otherwise(exact_line, params):
    assert distance(params, exact_line) > 0.0


def test_distance_non_negative(sim1):
    rng = np.random.default_rng(3)
    for params in rng.normal(scale=10, size=(50, 2)):
        assert distance(params, sim1) >= 0.0


def test_distance_on_empty_dataset_raises(empty_data):
    with pytest.raises(EmptyDatasetError):
        distance([0.0, 0.0], empty_data)


def test_empty_dataset_error_is_a_value_error(empty_data):
    with pytest.raises(ValueError):
        distance([0.0, 0.0], empty_data)


def test_distance_propagates_nan():
    data = Dataset([1.0, 2.0], [1.0, np.nan])
    assert np.isnan(distance([0.0, 1.0], data))


def test_make_objective_matches_distance(sim1):
    objective = make_objective(sim1)
    for params in ([0.0, 0.0], [4.0, 2.0], [-1.5, 0.5]):
        assert objective(params) == pytest.approx(distance(params, sim1))


def test_make_objective_rejects_empty(empty_data):
    with pytest.raises(EmptyDatasetError):
        make_objective(empty_data)

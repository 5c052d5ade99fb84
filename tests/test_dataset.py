import numpy as np
import pytest

from linfit import Dataset
from linfit.datasets import simulate_linear


def test_arrays_are_read_only(small_data):
    with pytest.raises(ValueError):
        small_data.x[0] = 100.0
    with pytest.raises(ValueError):
        small_data.y[0] = 100.0


def test_construction_copies_input():
    x = np.array([1.0, 2.0, 3.0])
    data = Dataset(x, [1.0, 2.0, 3.0])
    x[0] = 50.0
    assert data.x[0] == 1.0


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError, match="same length"):
        Dataset([1, 2, 3], [1, 2])


def test_two_dimensional_input_rejected():
    with pytest.raises(ValueError, match="one-dimensional"):
        Dataset([[1, 2], [3, 4]], [1, 2, 3, 4])


def test_from_pairs_preserves_order(small_data):
    assert list(small_data) == [(1.0, 4.2), (2.0, 6.1), (3.0, 7.9), (4.0, 10.2)]
    assert len(small_data) == 4


def test_empty_dataset(empty_data):
    assert empty_data.is_empty()
    assert len(empty_data) == 0
    assert Dataset.from_pairs([]).is_empty()


def test_n_distinct_x():
    data = Dataset([1, 1, 2, 2, 3], [0, 0, 0, 0, 0])
    assert data.n_distinct_x() == 3


def test_simulate_linear_layout():
    data = simulate_linear(seed=1)
    assert len(data) == 30
    assert data.n_distinct_x() == 10
    assert data.name == 'sim1'


def test_simulate_linear_is_reproducible():
    a = simulate_linear(seed=7)
    b = simulate_linear(seed=7)
    np.testing.assert_array_equal(a.y, b.y)


def test_simulate_linear_without_noise():
    data = simulate_linear(n_per_x=1, x_values=[0, 1, 2], intercept=1.0, slope=3.0, df=None)
    np.testing.assert_allclose(data.y, [1.0, 4.0, 7.0])

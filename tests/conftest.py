import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from linfit import Dataset
from linfit.datasets import simulate_linear
from linfit.utils.logger import setup_logger


@pytest.fixture(autouse=True, scope='session')
def _log_to_tmp(tmp_path_factory):
    setup_logger(log_dir=str(tmp_path_factory.mktemp('logs')))


@pytest.fixture
def small_data():
    """Roughly y = 2x + 2 with noise."""
    return Dataset.from_pairs([(1, 4.2), (2, 6.1), (3, 7.9), (4, 10.2)])


@pytest.fixture
def exact_line():
    x = np.array([0.0, 1.0, 2.0, 3.0])
    return Dataset(x, 1.0 + 2.0 * x)


@pytest.fixture
def empty_data():
    return Dataset([], [])


@pytest.fixture
def sim1():
    return simulate_linear(seed=2024)

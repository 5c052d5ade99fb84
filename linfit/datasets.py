"""
Sample datasets.
"""

import numpy as np

from .dataset import Dataset


def simulate_linear(n_per_x=3, x_values=range(1, 11), intercept=6.0, slope=1.5,
                    df=2, seed=None):
    """
    Simulate a noisy straight line.

    Each x in ``x_values`` is repeated ``n_per_x`` times and
    ``y = intercept + slope * x + noise`` with Student-t noise. The defaults
    give the 30-point "sim1" layout used in model-basics tutorials.

    Parameters
    ----------
    n_per_x : int, optional
        Repeats per x value, default 3
    x_values : iterable of float, optional
        Distinct x values, default 1..10
    intercept, slope : float, optional
        True line, default 6.0 and 1.5
    df : float or None, optional
        Degrees of freedom of the t noise. None gives noise-free data.
    seed : int, optional
        Seed for ``numpy.random.default_rng``

    Returns
    -------
    Dataset
        Simulated data, x sorted ascending
    """
    if n_per_x < 1:
        raise ValueError(f"n_per_x must be at least 1, got {n_per_x}")

    x = np.repeat(np.asarray(list(x_values), dtype=float), n_per_x)
    y = intercept + slope * x
    if df is not None:
        rng = np.random.default_rng(seed)
        y = y + rng.standard_t(df, size=x.size)

    return Dataset(x, y, name='sim1')

"""
Data preprocessing utilities.
"""

import numpy as np


def drop_missing(x, y):
    """
    Remove rows where x or y is NaN.

    Parameters
    ----------
    x : array_like
        X-axis data
    y : array_like
        Y-axis data

    Returns
    -------
    x_clean : ndarray
        X data without missing rows
    y_clean : ndarray
        Y data without missing rows
    mask : ndarray (bool)
        Boolean mask indicating which rows were kept
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    mask = ~(np.isnan(x) | np.isnan(y))

    return x[mask], y[mask], mask


def crop_range(x, y, x_min=None, x_max=None):
    """
    Crop data to an x-range.

    Parameters
    ----------
    x : array_like
        X-axis data
    y : array_like
        Y-axis data
    x_min : float or None, optional
        Minimum x value (inclusive)
    x_max : float or None, optional
        Maximum x value (inclusive)

    Returns
    -------
    x_roi : ndarray
        X data in range
    y_roi : ndarray
        Y data in range
    """
    x = np.asarray(x)
    y = np.asarray(y)

    mask = np.ones(len(x), dtype=bool)

    if x_min is not None:
        mask &= (x >= x_min)

    if x_max is not None:
        mask &= (x <= x_max)

    return x[mask], y[mask]

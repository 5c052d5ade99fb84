"""
Prediction, residual and distance functions for a model against a dataset.
"""

import numpy as np

from ..errors import EmptyDatasetError
from ..models import get_model


def predict(params, dataset, model='linear'):
    """
    Predicted y-values of a model at the dataset's x-values.

    Parameters
    ----------
    params : array_like
        Parameter vector (a0, a1, ...)
    dataset : Dataset
        Data to evaluate at
    model : str or ModelFamily, optional
        Model family, default 'linear' (``a0 + a1 * x``)

    Returns
    -------
    ndarray
        One prediction per data point

    Raises
    ------
    DimensionMismatchError
        If params does not have the family's parameter count
    """
    return get_model(model).evaluate(dataset.x, params)


def residuals(params, dataset, model='linear'):
    """Observed minus predicted values, parallel to the dataset."""
    return dataset.y - predict(params, dataset, model=model)


def distance(params, dataset, model='linear'):
    """
    Root-mean-square residual of a model against a dataset.

    Parameters
    ----------
    params : array_like
        Parameter vector
    dataset : Dataset
        Data to score against
    model : str or ModelFamily, optional
        Model family, default 'linear'

    Returns
    -------
    float
        ``sqrt(mean((y - prediction)**2))``, always >= 0 for finite data

    Raises
    ------
    EmptyDatasetError
        If the dataset has no points
    """
    if dataset.is_empty():
        raise EmptyDatasetError("Cannot compute distance on an empty dataset")
    res = residuals(params, dataset, model=model)
    return float(np.sqrt(np.mean(res**2)))


def make_objective(dataset, model='linear'):
    """
    Bind a dataset into a scalar objective ``f(params) -> distance``.

    The dataset is checked once here, so the returned callable does not
    repeat the emptiness test on every evaluation.
    """
    if dataset.is_empty():
        raise EmptyDatasetError("Cannot build an objective on an empty dataset")
    family = get_model(model)
    design = family.design_matrix(dataset.x)
    y = dataset.y

    def objective(params):
        params = family.check_params(params)
        res = y - design @ params
        return float(np.sqrt(np.mean(res**2)))

    return objective

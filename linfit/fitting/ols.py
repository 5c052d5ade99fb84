"""
Closed-form ordinary least squares.
"""

import numpy as np

from ..errors import EmptyDatasetError, SingularDesignError
from ..models import get_model
from ..utils.logger import log_debug


def ordinary_least_squares(dataset, model='linear'):
    """
    Exact least-squares parameters for a model family.

    Solves ``min ||y - X @ a||^2`` with ``numpy.linalg.lstsq`` on the
    family's design matrix X.

    Parameters
    ----------
    dataset : Dataset
        Data to fit
    model : str or ModelFamily, optional
        Model family, default 'linear'

    Returns
    -------
    ndarray
        Parameter vector (a0, a1, ...)

    Raises
    ------
    EmptyDatasetError
        If the dataset has no points
    SingularDesignError
        If there are fewer distinct x-values than parameters, so the
        solution is not unique (e.g. all x identical for a straight line)
    """
    family = get_model(model)
    if dataset.is_empty():
        raise EmptyDatasetError("Cannot compute least squares on an empty dataset")

    n_distinct = dataset.n_distinct_x()
    if n_distinct < family.n_params:
        raise SingularDesignError(
            f"Model '{family.name}' needs at least {family.n_params} distinct x-values, "
            f"got {n_distinct}")

    design = family.design_matrix(dataset.x)
    coeffs, _, rank, _ = np.linalg.lstsq(design, dataset.y, rcond=None)
    if rank < family.n_params:
        raise SingularDesignError(
            f"Design matrix is rank deficient (rank {rank} < {family.n_params})")

    log_debug(f"OLS fit ({family.name}): {coeffs}")
    return coeffs

"""
Exhaustive grid search over straight-line parameters.
"""

from collections import namedtuple

import numpy as np

from ..errors import EmptyDatasetError
from ..models import get_model
from ..utils.logger import log_debug


CandidateModel = namedtuple('CandidateModel', ['params', 'distance'])
CandidateModel.__doc__ = "A parameter vector and its distance to the data."


def _check_range(value_range, label):
    try:
        lo, hi = value_range
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a (min, max) pair, got {value_range!r}")
    lo, hi = float(lo), float(hi)
    if lo > hi:
        raise ValueError(f"{label} is reversed: min {lo} > max {hi}")
    return lo, hi


def _check_resolution(resolution):
    if np.ndim(resolution) == 0:
        counts = (resolution, resolution)
    else:
        counts = tuple(resolution)
        if len(counts) != 2:
            raise ValueError(f"resolution must be an int or a pair of ints, got {resolution!r}")
    for n in counts:
        if int(n) != n or n < 1:
            raise ValueError(f"resolution must be a positive integer, got {n!r}")
    return int(counts[0]), int(counts[1])


def make_grid(a0_range, a1_range, resolution=25):
    """
    Regular grid of (a0, a1) pairs.

    Parameters
    ----------
    a0_range, a1_range : tuple of float
        Inclusive (min, max) for intercept and slope
    resolution : int or tuple of int, optional
        Samples per axis, one count for both or (n0, n1). Default 25

    Returns
    -------
    ndarray
        Array of shape (n0 * n1, 2), row-major with a0 varying slowest
    """
    lo0, hi0 = _check_range(a0_range, 'a0_range')
    lo1, hi1 = _check_range(a1_range, 'a1_range')
    n0, n1 = _check_resolution(resolution)

    a0 = np.linspace(lo0, hi0, n0)
    a1 = np.linspace(lo1, hi1, n1)
    grid = np.stack(np.meshgrid(a0, a1, indexing='ij'), axis=-1)
    return grid.reshape(-1, 2)


def score_grid(grid, dataset, model='linear'):
    """
    Distance of every grid row to the dataset, computed in one pass.

    Parameters
    ----------
    grid : ndarray
        Candidate parameter vectors, shape (m, 2)
    dataset : Dataset
        Data to score against
    model : str or ModelFamily, optional
        Two-parameter model family, default 'linear'

    Returns
    -------
    ndarray
        Distances, shape (m,)
    """
    if dataset.is_empty():
        raise EmptyDatasetError("Cannot run a grid search on an empty dataset")
    design = get_model(model).design_matrix(dataset.x)
    predictions = design @ grid.T
    res = dataset.y[:, None] - predictions
    return np.sqrt(np.mean(res**2, axis=0))


def grid_search(dataset, a0_range, a1_range, resolution=25, top=None, model='linear'):
    """
    Score a regular grid of two-parameter models and rank them.

    Parameters
    ----------
    dataset : Dataset
        Data to fit
    a0_range : tuple of float
        Intercept range (min, max), inclusive
    a1_range : tuple of float
        Slope range (min, max), inclusive
    resolution : int or tuple of int, optional
        Samples per axis, default 25
    top : int, optional
        Return only the best ``top`` candidates
    model : str or ModelFamily, optional
        Model family with exactly two parameters, default 'linear'

    Returns
    -------
    list of CandidateModel
        Candidates sorted by ascending distance. Equal distances keep
        generation order (a0 outer, a1 inner).

    Examples
    --------
    >>> best = grid_search(data, (-5, 20), (1, 3), resolution=25)[0]
    >>> best.params, best.distance
    """
    family = get_model(model)
    if family.n_params != 2:
        raise ValueError(f"Grid search needs a two-parameter model, "
                         f"'{family.name}' has {family.n_params}")

    grid = make_grid(a0_range, a1_range, resolution)
    scores = score_grid(grid, dataset, model=family)
    order = np.argsort(scores, kind='stable')
    if top is not None:
        order = order[:top]

    log_debug(f"Grid search: {len(grid)} candidates, best distance {np.min(scores):.6g}")

    return [CandidateModel(grid[i].copy(), float(scores[i])) for i in order]

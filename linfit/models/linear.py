"""
Straight-line model.
"""

import numpy as np

from .base import ModelFamily


class LinearModel(ModelFamily):
    """
    Straight line ``y = a0 + a1 * x``.

    Notes
    -----
    a0 is the intercept, a1 the slope.
    """

    name = 'linear'
    param_names = ('a0', 'a1')

    def design_matrix(self, x):
        x = np.asarray(x, dtype=float)
        return np.column_stack([np.ones_like(x), x])

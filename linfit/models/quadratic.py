"""
Quadratic model.
"""

import numpy as np

from .base import ModelFamily


class QuadraticModel(ModelFamily):
    """Parabola ``y = a0 + a1 * x + a2 * x**2``."""

    name = 'quadratic'
    param_names = ('a0', 'a1', 'a2')

    def design_matrix(self, x):
        x = np.asarray(x, dtype=float)
        return np.column_stack([np.ones_like(x), x, x**2])

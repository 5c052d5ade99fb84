"""
Base class for parametric model families that are linear in their parameters.
"""

import numpy as np

from ..errors import DimensionMismatchError


class ModelFamily:
    """
    A model family ``y = X(x) @ params`` defined by its design matrix.

    Attributes
    ----------
    name : str
        Registry name of the family
    param_names : tuple of str
        Parameter names in vector order (``a0``, ``a1``, ...)
    """

    name = None
    param_names = ()

    @property
    def n_params(self):
        return len(self.param_names)

    def design_matrix(self, x):
        """
        Build the design matrix for x.

        Parameters
        ----------
        x : array_like
            Independent variable

        Returns
        -------
        ndarray
            Matrix of shape (len(x), n_params)
        """
        raise NotImplementedError

    def check_params(self, params):
        """Return params as a float vector, failing if its length is wrong."""
        params = np.asarray(params, dtype=float).ravel()
        if params.size != self.n_params:
            raise DimensionMismatchError(self.n_params, params.size, self.name)
        return params

    def evaluate(self, x, params):
        """Evaluate the model at x for one parameter vector."""
        params = self.check_params(params)
        return self.design_matrix(x) @ params

    def __repr__(self):
        return f"{type(self).__name__}(params={list(self.param_names)})"

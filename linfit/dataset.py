"""
Immutable (x, y) dataset container.
"""

import numpy as np


class Dataset:
    """
    Ordered sequence of (x, y) pairs.

    The arrays are copied on construction and marked read-only, so a
    Dataset can be shared between fitters without being modified.

    Attributes
    ----------
    x : ndarray
        X-axis data (float64, read-only)
    y : ndarray
        Y-axis data (float64, read-only)
    name : str or None
        Optional label (file name, dataset name)
    """

    def __init__(self, x_data, y_data, name=None):
        x = np.array(x_data, dtype=float)
        y = np.array(y_data, dtype=float)
        if x.ndim > 1 or y.ndim > 1:
            raise ValueError(f"X and Y must be one-dimensional: got shapes {x.shape} and {y.shape}")
        x = np.atleast_1d(x)
        y = np.atleast_1d(y)
        if x.shape != y.shape:
            raise ValueError(f"X and Y must have same length: {len(x)} vs {len(y)}")
        x.setflags(write=False)
        y.setflags(write=False)
        self._x = x
        self._y = y
        self.name = name

    @classmethod
    def from_pairs(cls, pairs, name=None):
        """
        Build a dataset from an iterable of (x, y) pairs.

        Examples
        --------
        >>> Dataset.from_pairs([(1, 4.2), (2, 6.1), (3, 7.9)])
        Dataset(n=3)
        """
        pairs = list(pairs)
        if not pairs:
            return cls([], [], name=name)
        x, y = zip(*pairs)
        return cls(x, y, name=name)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def is_empty(self):
        return self._x.size == 0

    def n_distinct_x(self):
        """Number of distinct x-values."""
        return np.unique(self._x).size

    def __len__(self):
        return self._x.size

    def __iter__(self):
        return zip(self._x.tolist(), self._y.tolist())

    def __repr__(self):
        if self.name:
            return f"Dataset(name={self.name!r}, n={len(self)})"
        return f"Dataset(n={len(self)})"

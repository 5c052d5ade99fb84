"""Linear model fitting: distances, grid search, minimization and least squares."""

from . import models
from . import fitting
from . import data_import
from . import data_preprocessing
from . import datasets
from .dataset import Dataset
from .errors import (LinfitError, EmptyDatasetError, DimensionMismatchError,
                     SingularDesignError, NonConvergenceError)

__version__ = '0.1.0'

__all__ = [
    'models',
    'fitting',
    'data_import',
    'data_preprocessing',
    'datasets',
    'Dataset',
    'LinfitError',
    'EmptyDatasetError',
    'DimensionMismatchError',
    'SingularDesignError',
    'NonConvergenceError',
]

"""Fitting engine: distances, grid search, minimizers and least squares."""

from .fitter import ModelFitter, minimize, run_minimizer
from .grid import CandidateModel, grid_search, make_grid
from .minimizers import (FitResult, Minimizer, LmfitMinimizer, ScipyMinimizer,
                         FunctionMinimizer, get_minimizer)
from .objective import predict, residuals, distance, make_objective
from .ols import ordinary_least_squares
from .statistics import calculate_statistics, residual_summary, format_statistics

__all__ = [
    'ModelFitter',
    'minimize',
    'run_minimizer',
    'CandidateModel',
    'grid_search',
    'make_grid',
    'FitResult',
    'Minimizer',
    'LmfitMinimizer',
    'ScipyMinimizer',
    'FunctionMinimizer',
    'get_minimizer',
    'predict',
    'residuals',
    'distance',
    'make_objective',
    'ordinary_least_squares',
    'calculate_statistics',
    'residual_summary',
    'format_statistics',
]

"""
Main model fitter class.
"""

import numpy as np

from ..errors import NonConvergenceError
from ..models import get_model
from ..utils.logger import log_info, log_warning
from .grid import grid_search
from .minimizers import as_minimizer
from .objective import distance, make_objective, predict, residuals
from .ols import ordinary_least_squares
from .statistics import calculate_statistics, format_statistics, residual_summary


def run_minimizer(dataset, initial_guess, minimizer=None, model='linear'):
    """
    Run a minimizer on the distance between a model and a dataset.

    Parameters
    ----------
    dataset : Dataset
        Data to fit
    initial_guess : array_like
        Starting parameter vector
    minimizer : Minimizer, str or callable, optional
        Optimizer to delegate to. Default: lmfit Nelder-Mead
    model : str or ModelFamily, optional
        Model family, default 'linear'

    Returns
    -------
    FitResult
        Minimizer outcome; ``.params`` holds the parameter vector

    Raises
    ------
    DimensionMismatchError
        If initial_guess or the minimizer's parameters have the wrong length
    EmptyDatasetError
        If the dataset has no points
    NonConvergenceError
        If the minimizer reports failure (its message is kept as is)
    """
    family = get_model(model)
    x0 = family.check_params(initial_guess)
    objective = make_objective(dataset, model=family)

    result = as_minimizer(minimizer).minimize(objective, x0)
    if not result.success:
        log_warning(f"Minimizer {result.method} did not converge: {result.message}")
        raise NonConvergenceError(result.message, result)
    result.params = family.check_params(result.params)

    log_info(f"Minimizer {result.method} converged after {result.nfev} evaluations: "
             f"params={result.params.tolist()}, distance={result.distance:.6g}")
    return result


def minimize(dataset, initial_guess, minimizer=None, model='linear'):
    """
    Parameter vector minimizing the distance to the dataset.

    Same arguments and errors as ``run_minimizer``; only the parameters of
    the converged run are returned.

    Examples
    --------
    >>> minimize(data, [0, 0], minimizer='scipy')
    """
    return run_minimizer(dataset, initial_guess, minimizer=minimizer, model=model).params


class ModelFitter:
    """
    Fit a model family to one dataset.

    Attributes
    ----------
    dataset : Dataset
        Data being fitted (read-only)
    model : ModelFamily
        Model family
    minimizer : Minimizer
        Optimizer used by ``minimize``
    candidates : list of CandidateModel or None
        Ranked grid search result
    result : FitResult or None
        Last minimizer result
    ols_params : ndarray or None
        Closed-form least squares solution
    """

    def __init__(self, dataset, model='linear', minimizer=None):
        """
        Initialize ModelFitter.

        Parameters
        ----------
        dataset : Dataset
            Data to fit
        model : str or ModelFamily, optional
            Model family, default 'linear'
        minimizer : Minimizer, str or callable, optional
            Optimizer for ``minimize``, default lmfit Nelder-Mead
        """
        self.dataset = dataset
        self.model = get_model(model)
        self.minimizer = as_minimizer(minimizer)

        self.candidates = None
        self.result = None
        self.ols_params = None

    def predict(self, params):
        return predict(params, self.dataset, model=self.model)

    def residuals(self, params):
        return residuals(params, self.dataset, model=self.model)

    def distance(self, params):
        return distance(params, self.dataset, model=self.model)

    def evaluate(self, params):
        """
        Data, predictions and residuals for one parameter vector.

        Returns
        -------
        dict
            Columns 'x', 'y', 'prediction', 'residual'
        """
        prediction = self.predict(params)
        return {
            'x': self.dataset.x,
            'y': self.dataset.y,
            'prediction': prediction,
            'residual': self.dataset.y - prediction,
        }

    def grid_search(self, a0_range, a1_range, resolution=25, top=None):
        """
        Rank a grid of candidate parameters by distance.

        Only defined for two-parameter model families.
        """
        self.candidates = grid_search(self.dataset, a0_range, a1_range,
                                      resolution=resolution, top=top, model=self.model)
        return self.candidates

    def minimize(self, initial_guess=None):
        """
        Run the minimizer from ``initial_guess`` (zeros if omitted).

        Returns
        -------
        ndarray
            Parameter vector at convergence; the full FitResult is kept
            on ``self.result``
        """
        if initial_guess is None:
            initial_guess = np.zeros(self.model.n_params)
        self.result = run_minimizer(self.dataset, initial_guess, minimizer=self.minimizer,
                                    model=self.model)
        return self.result.params

    def ordinary_least_squares(self):
        """Closed-form least squares parameters."""
        self.ols_params = ordinary_least_squares(self.dataset, model=self.model)
        return self.ols_params

    def best_params(self):
        """
        Best available parameter vector.

        Preference order: minimizer result, least squares, top grid candidate.
        """
        if self.result is not None:
            return self.result.params
        if self.ols_params is not None:
            return self.ols_params
        if self.candidates:
            return self.candidates[0].params
        raise ValueError("No fit result available. Run minimize(), "
                         "ordinary_least_squares() or grid_search() first.")

    def get_statistics(self, params=None):
        """
        Calculate fit statistics.

        Parameters
        ----------
        params : array_like, optional
            Parameter vector, default ``best_params()``

        Returns
        -------
        stats : dict
            Fit quality metrics plus residual mean, std and max_abs
        """
        if params is None:
            params = self.best_params()
        y_fit = self.predict(params)
        stats = calculate_statistics(self.dataset.y, y_fit, self.model.n_params)
        for key, value in residual_summary(self.dataset.y - y_fit).items():
            stats[f'residual_{key}'] = value
        return stats

    def get_fit_report(self):
        """
        Get detailed fit report.

        Returns
        -------
        str
            Fit report string
        """
        params = self.best_params()
        names = self.model.param_names

        report = "[[ MODEL ]]\n"
        report += f"Family:  {self.model.name}\n"
        report += f"Dataset: {self.dataset.name or 'unnamed'} ({len(self.dataset)} points)\n\n"

        report += "[[ PARAMETERS ]]\n"
        for name, value in zip(names, params):
            report += f"  - {name}: {value:.6g}\n"
        report += f"  - distance: {self.distance(params):.6g}\n\n"

        if self.result is not None:
            report += "[[ MINIMIZER ]]\n"
            report += f"Method:      {self.result.method}\n"
            report += f"Evaluations: {self.result.nfev}\n"
            report += f"Message:     {self.result.message}\n\n"

        if self.ols_params is not None:
            report += "[[ LEAST SQUARES ]]\n"
            for name, value in zip(names, self.ols_params):
                report += f"  - {name}: {value:.6g}\n"
            if self.result is not None:
                diff = np.max(np.abs(self.result.params - self.ols_params))
                report += f"  - max |minimizer - OLS|: {diff:.3e}\n"
            report += "\n"

        if self.candidates:
            report += "[[ GRID SEARCH ]]\n"
            report += f"Candidates: {len(self.candidates)}\n"
            for rank, cand in enumerate(self.candidates[:5], start=1):
                values = ", ".join(f"{v:.4g}" for v in cand.params)
                report += f"  {rank}. ({values})  distance={cand.distance:.6g}\n"
            report += "\n"

        report += format_statistics(self.get_statistics(params))
        return report

"""
Minimizer adapters.

A minimizer takes a scalar objective ``f(params) -> float`` and a starting
vector and returns a FitResult. The fitter only relies on that contract, so
any optimizer can be plugged in.
"""

import numpy as np
from lmfit import Parameters, minimize as lmfit_minimize
from scipy.optimize import minimize as scipy_minimize


# Nelder-Mead stopping tolerances; the library defaults (1e-4) leave the
# straight-line fit visibly short of the least-squares optimum.
NELDER_OPTIONS = {'xatol': 1e-8, 'fatol': 1e-10, 'maxiter': 4000}


class FitResult:
    """
    Outcome of one minimizer run.

    Attributes
    ----------
    params : ndarray
        Parameter vector at termination
    distance : float
        Objective value at ``params``
    success : bool
        Whether the minimizer reported convergence
    message : str
        Minimizer's termination message
    nfev : int or None
        Number of objective evaluations
    method : str
        Name of the optimization method
    raw : object
        Underlying library result (lmfit MinimizerResult, scipy OptimizeResult)
    """

    def __init__(self, params, distance, success=True, message='', nfev=None,
                 method='', raw=None):
        self.params = np.asarray(params, dtype=float)
        self.distance = float(distance)
        self.success = bool(success)
        self.message = message
        self.nfev = nfev
        self.method = method
        self.raw = raw

    def __repr__(self):
        return (f"FitResult(params={self.params.tolist()}, distance={self.distance:.6g}, "
                f"success={self.success}, method={self.method!r})")


class Minimizer:
    """Base class: ``minimize(objective, x0) -> FitResult``."""

    method = ''

    def minimize(self, objective, x0):
        raise NotImplementedError


class LmfitMinimizer(Minimizer):
    """
    Minimize with ``lmfit.minimize`` using a scalar method.

    Parameters
    ----------
    method : str, optional
        lmfit scalar method ('nelder', 'powell', 'bfgs', 'newton', ...).
        Default 'nelder' (Nelder-Mead)
    max_nfev : int, optional
        Maximum number of function evaluations
    param_names : sequence of str, optional
        Names for the lmfit Parameters, default a0, a1, ...
    **fit_kws
        Additional keyword arguments for lmfit.minimize
    """

    def __init__(self, method='nelder', max_nfev=None, param_names=None, **fit_kws):
        self.method = method
        self.max_nfev = max_nfev
        self.param_names = param_names
        self.fit_kws = fit_kws
        if method == 'nelder' and 'options' not in fit_kws:
            self.fit_kws['options'] = dict(NELDER_OPTIONS)

    def _make_params(self, x0):
        names = self.param_names or [f'a{i}' for i in range(len(x0))]
        if len(names) != len(x0):
            raise ValueError(f"Got {len(names)} parameter names for {len(x0)} values")
        params = Parameters()
        for name, value in zip(names, x0):
            params.add(name, value=float(value))
        return params

    def minimize(self, objective, x0):
        x0 = np.asarray(x0, dtype=float).ravel()
        params = self._make_params(x0)
        names = list(params.keys())

        def fcn(p):
            return objective(np.array([p[name].value for name in names]))

        result = lmfit_minimize(fcn, params, method=self.method, max_nfev=self.max_nfev,
                                calc_covar=False, **self.fit_kws)
        best = np.array([result.params[name].value for name in names])

        return FitResult(best, objective(best), success=result.success,
                         message=str(result.message), nfev=result.nfev,
                         method=f"lmfit:{self.method}", raw=result)


class ScipyMinimizer(Minimizer):
    """
    Minimize with ``scipy.optimize.minimize``.

    Parameters
    ----------
    method : str, optional
        scipy method name, default 'Nelder-Mead'
    options : dict, optional
        Solver options; tight tolerances are used for Nelder-Mead when omitted
    tol : float, optional
        Generic tolerance passed to scipy
    """

    def __init__(self, method='Nelder-Mead', options=None, tol=None):
        self.method = method
        if options is None and method == 'Nelder-Mead':
            options = dict(NELDER_OPTIONS)
        self.options = options
        self.tol = tol

    def minimize(self, objective, x0):
        x0 = np.asarray(x0, dtype=float).ravel()
        result = scipy_minimize(objective, x0, method=self.method, tol=self.tol,
                                options=self.options)
        return FitResult(result.x, result.fun, success=result.success,
                         message=str(result.message), nfev=result.get('nfev'),
                         method=f"scipy:{self.method}", raw=result)


class FunctionMinimizer(Minimizer):
    """
    Adapt a plain callable ``func(objective, x0)`` to the Minimizer interface.

    The callable may return a FitResult, or just a parameter vector which is
    then reported as a successful run.
    """

    def __init__(self, func, method=None):
        self.func = func
        self.method = method or getattr(func, '__name__', 'function')

    def minimize(self, objective, x0):
        out = self.func(objective, x0)
        if isinstance(out, FitResult):
            return out
        params = np.asarray(out, dtype=float)
        return FitResult(params, objective(params), method=self.method)


# Minimizer registry
MINIMIZERS = {
    'lmfit': LmfitMinimizer,
    'scipy': ScipyMinimizer,
}


def get_minimizer(name='lmfit', **kws):
    """
    Create a minimizer by name.

    Parameters
    ----------
    name : str
        'lmfit' or 'scipy'
    **kws
        Constructor arguments (method, max_nfev, options, ...)

    Examples
    --------
    >>> get_minimizer('lmfit', method='powell')
    >>> get_minimizer('scipy', method='BFGS')
    """
    if name not in MINIMIZERS:
        raise ValueError(f"Unknown minimizer: {name}. "
                         f"Available: {list(MINIMIZERS.keys())}")
    return MINIMIZERS[name](**kws)


def as_minimizer(minimizer):
    """Return a Minimizer for None (default), a Minimizer, a name or a callable."""
    if minimizer is None:
        return LmfitMinimizer()
    if isinstance(minimizer, Minimizer):
        return minimizer
    if isinstance(minimizer, str):
        return get_minimizer(minimizer)
    if callable(minimizer):
        return FunctionMinimizer(minimizer)
    raise TypeError(f"Cannot use {type(minimizer).__name__} as a minimizer")

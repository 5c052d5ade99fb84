"""
Goodness-of-fit statistics and residual diagnostics.
"""

import numpy as np


def calculate_statistics(y_data, y_fit, n_params):
    """
    Calculate goodness-of-fit statistics.

    Parameters
    ----------
    y_data : array_like
        Observed Y data
    y_fit : array_like
        Fitted Y data
    n_params : int
        Number of model parameters

    Returns
    -------
    stats : dict
        Dictionary containing various fit statistics:
        - 'r_squared': R² (coefficient of determination)
        - 'adj_r_squared': Adjusted R²
        - 'chi_squared': Sum of squared residuals
        - 'reduced_chi_squared': Reduced chi-squared
        - 'rmse': Root mean square error (the fit distance)
        - 'aic': Akaike Information Criterion
        - 'bic': Bayesian Information Criterion
    """
    y_data = np.asarray(y_data, dtype=float)
    y_fit = np.asarray(y_fit, dtype=float)

    n = len(y_data)
    if n == 0:
        raise ValueError("Cannot calculate statistics without data")
    residuals = y_data - y_fit
    ss_res = np.sum(residuals**2)
    ss_tot = np.sum((y_data - np.mean(y_data))**2)

    r_squared = 1 - (ss_res / ss_tot) if ss_tot != 0 else 0.0

    if n > n_params + 1:
        adj_r_squared = 1 - (1 - r_squared) * (n - 1) / (n - n_params - 1)
    else:
        adj_r_squared = r_squared

    dof = n - n_params
    reduced_chi_squared = ss_res / dof if dof > 0 else np.inf

    rmse = np.sqrt(ss_res / n)

    # AIC = n*ln(SS_res/n) + 2*k,  BIC = n*ln(SS_res/n) + k*ln(n)
    if ss_res > 0:
        aic = n * np.log(ss_res / n) + 2 * n_params
        bic = n * np.log(ss_res / n) + n_params * np.log(n)
    else:
        aic = -np.inf
        bic = -np.inf

    return {
        'r_squared': float(r_squared),
        'adj_r_squared': float(adj_r_squared),
        'chi_squared': float(ss_res),
        'reduced_chi_squared': float(reduced_chi_squared),
        'rmse': float(rmse),
        'aic': float(aic),
        'bic': float(bic),
        'n_data': n,
        'n_params': n_params,
        'dof': dof,
    }


def residual_summary(residuals):
    """
    Summarize a residual vector.

    Parameters
    ----------
    residuals : array_like
        Observed minus predicted values

    Returns
    -------
    dict
        'mean', 'std' (sample, ddof=1; 0 for a single point) and 'max_abs'
    """
    res = np.asarray(residuals, dtype=float)
    if res.size == 0:
        raise ValueError("Cannot summarize an empty residual vector")
    return {
        'mean': float(np.mean(res)),
        'std': float(np.std(res, ddof=1)) if res.size > 1 else 0.0,
        'max_abs': float(np.max(np.abs(res))),
    }


def format_statistics(stats):
    """
    Format statistics for display.

    Parameters
    ----------
    stats : dict
        Statistics dictionary

    Returns
    -------
    str
        Formatted statistics string
    """
    lines = []
    lines.append("=== Fit Statistics ===")
    lines.append(f"R² = {stats.get('r_squared', 0):.6f}")
    lines.append(f"Adj. R² = {stats.get('adj_r_squared', 0):.6f}")
    lines.append(f"RMSE = {stats.get('rmse', 0):.6e}")
    lines.append(f"χ² = {stats.get('chi_squared', 0):.6e}")
    lines.append(f"Reduced χ² = {stats.get('reduced_chi_squared', 0):.6f}")
    lines.append(f"AIC = {stats.get('aic', 0):.2f}")
    lines.append(f"BIC = {stats.get('bic', 0):.2f}")
    lines.append(f"N data = {stats.get('n_data', 0)}")
    lines.append(f"N parameters = {stats.get('n_params', 0)}")
    lines.append(f"Degrees of freedom = {stats.get('dof', 0)}")

    if 'residual_mean' in stats:
        lines.append(f"Residual mean = {stats['residual_mean']:.6e}")
        lines.append(f"Residual std = {stats['residual_std']:.6e}")
        lines.append(f"Max |residual| = {stats['residual_max_abs']:.6e}")

    return '\n'.join(lines)

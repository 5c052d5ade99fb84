import numpy as np
import pytest

from linfit import NonConvergenceError
from linfit.fitting import FitResult, Minimizer, ModelFitter, format_statistics


def test_fitter_binds_dataset(small_data):
    fitter = ModelFitter(small_data)
    np.testing.assert_allclose(fitter.predict([2.0, 2.0]), [4.0, 6.0, 8.0, 10.0])
    assert fitter.distance([2.0, 2.0]) == pytest.approx(np.sqrt(0.025))


def test_full_workflow(sim1):
    fitter = ModelFitter(sim1)
    candidates = fitter.grid_search((-5, 20), (1, 3), resolution=25)
    params = fitter.minimize(candidates[0].params)
    ols = fitter.ordinary_least_squares()

    np.testing.assert_allclose(params, ols, atol=1e-3)
    assert fitter.distance(params) <= candidates[0].distance + 1e-12
    assert fitter.result.success


def test_minimize_defaults_to_zero_start(small_data):
    fitter = ModelFitter(small_data)
    params = fitter.minimize()
    np.testing.assert_allclose(params, fitter.ordinary_least_squares(), atol=1e-3)


def test_evaluate_columns(small_data):
    table = ModelFitter(small_data).evaluate([2.0, 2.0])
    assert set(table) == {'x', 'y', 'prediction', 'residual'}
    np.testing.assert_allclose(table['residual'], table['y'] - table['prediction'])


def test_best_params_preference(small_data):
    fitter = ModelFitter(small_data)
    with pytest.raises(ValueError, match="No fit result"):
        fitter.best_params()

    fitter.grid_search((0, 4), (0, 4), resolution=5)
    np.testing.assert_array_equal(fitter.best_params(), fitter.candidates[0].params)

    fitter.ordinary_least_squares()
    np.testing.assert_array_equal(fitter.best_params(), fitter.ols_params)

    fitter.minimize()
    np.testing.assert_array_equal(fitter.best_params(), fitter.result.params)


def test_statistics_for_ols(sim1):
    fitter = ModelFitter(sim1)
    fitter.ordinary_least_squares()
    stats = fitter.get_statistics()

    assert stats['n_data'] == 30
    assert stats['n_params'] == 2
    assert stats['dof'] == 28
    assert 0.0 < stats['r_squared'] <= 1.0
    assert stats['rmse'] == pytest.approx(fitter.distance(fitter.ols_params))
    assert abs(stats['residual_mean']) < 1e-9
    assert "Residual mean" in format_statistics(stats)


def test_grid_search_requires_two_parameters(sim1):
    fitter = ModelFitter(sim1, model='quadratic')
    with pytest.raises(ValueError, match="two-parameter"):
        fitter.grid_search((0, 1), (0, 1))


def test_quadratic_minimize_matches_ols():
    from linfit import Dataset
    x = np.linspace(0, 4, 12)
    data = Dataset(x, 0.5 + 1.0 * x - 0.3 * x**2 + 0.05 * np.sin(7 * x))
    fitter = ModelFitter(data, model='quadratic', minimizer='scipy')
    np.testing.assert_allclose(fitter.minimize(), fitter.ordinary_least_squares(), atol=1e-3)


def test_non_convergence_leaves_no_result(small_data):
    class Failing(Minimizer):
        def minimize(self, objective, x0):
            return FitResult(x0, objective(x0), success=False, message="did not converge")

    fitter = ModelFitter(small_data, minimizer=Failing())
    with pytest.raises(NonConvergenceError, match="did not converge"):
        fitter.minimize()
    assert fitter.result is None


def test_fit_report_sections(small_data):
    fitter = ModelFitter(small_data)
    fitter.grid_search((0, 4), (0, 4), resolution=9)
    fitter.ordinary_least_squares()
    fitter.minimize()
    report = fitter.get_fit_report()

    for section in ("[[ MODEL ]]", "[[ PARAMETERS ]]", "[[ MINIMIZER ]]",
                    "[[ LEAST SQUARES ]]", "[[ GRID SEARCH ]]", "=== Fit Statistics ==="):
        assert section in report
    assert "Candidates: 81" in report

"""
End-to-end worked example.

y = -2 + 1.25 x + N(0, 3²), n = 50, x ~ U(0, 10), seed 7: simulate one
sample, fit it, inspect the residuals, then check the analytic slope
standard error against Monte Carlo and bootstrap spreads.
"""

import numpy as np
import pytest

import regsim
from regsim import (
    ModelParameters,
    compare_standard_errors,
    diagnose,
    fit,
    prediction_interval,
    run_bootstrap,
    run_monte_carlo,
    simulate,
)


PARAMS = ModelParameters(intercept=-2.0, slope=1.25, noise_std=3.0)


@pytest.fixture(scope="module")
def sample():
    return simulate(50, (0.0, 10.0), PARAMS, np.random.default_rng(7))


@pytest.fixture(scope="module")
def model(sample):
    return fit(sample)


class TestWorkedExample:

    def test_slope_recovered(self, model):
        assert abs(model.slope_estimate - 1.25) <= 0.5

    def test_slope_ci_covers_truth(self, model):
        assert model.confidence_interval('slope', 0.999).contains(1.25)

    def test_monte_carlo_spread_matches_analytic_se(self, sample, model):
        mc = run_monte_carlo(5000, sample.x, PARAMS, np.random.default_rng(7))
        assert mc.R == 5000
        assert float(np.std(mc.slopes, ddof=1)) == pytest.approx(model.slope_se, rel=0.2)

    def test_bootstrap_spread_matches_analytic_se(self, sample, model):
        bs = run_bootstrap(2000, sample, np.random.default_rng(7))
        cmp = compare_standard_errors(model, bs)
        assert cmp.ratio[1] == pytest.approx(1.0, abs=0.35)

    def test_prediction_interval(self, model):
        pi = prediction_interval(model, 5.0)
        assert pi.lower < PARAMS.intercept + PARAMS.slope * 5.0 + 3 * 3.0
        assert pi.width > 2 * model.residual_se

    def test_residual_summary(self, model):
        diag = diagnose(model)
        assert diag.n == 50
        assert abs(diag.residual_mean) < 1e-9
        assert diag.residual_std == pytest.approx(
            model.residual_se * np.sqrt(48 / 49))

    def test_version(self):
        assert regsim.__version__ == "0.1.0"

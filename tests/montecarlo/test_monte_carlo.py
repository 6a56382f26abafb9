"""
Tests for run_monte_carlo().

The Monte Carlo spread of the OLS estimates must match the normal-theory
standard errors, and a seeded run must be exactly reproducible.
"""

import numpy as np
import pytest

from regsim.core.exceptions import (
    DegenerateSampleError,
    InvalidParameterError,
    ValidationError,
)
from regsim.montecarlo import TrialCollection, run_monte_carlo
from regsim.regression import fit
from regsim.simulation import ModelParameters, simulate_response


@pytest.fixture
def fixed_x():
    return np.random.default_rng(123).uniform(0.0, 10.0, 200)


class TestMonteCarloBasic:

    def test_returns_collection(self, fixed_x, reference_params):
        mc = run_monte_carlo(50, fixed_x, reference_params, np.random.default_rng(1))
        assert isinstance(mc, TrialCollection)
        assert mc.kind == 'monte_carlo'
        assert mc.R == 50
        assert mc.estimates.shape == (50, 2)
        assert mc.n_skipped == 0
        assert mc.backend_name == 'cpu_trials'

    def test_reference_is_truth(self, fixed_x, reference_params):
        mc = run_monte_carlo(10, fixed_x, reference_params, 0)
        np.testing.assert_array_equal(mc.reference, [-2.0, 1.25])
        np.testing.assert_allclose(mc.bias, mc.mean - mc.reference)

    def test_trials_follow_one_stream(self, fixed_x, reference_params):
        mc = run_monte_carlo(3, fixed_x, reference_params, np.random.default_rng(8))

        gen = np.random.default_rng(8)
        for b in range(3):
            expected = fit(simulate_response(fixed_x, reference_params, gen))
            np.testing.assert_allclose(mc.estimates[b], expected.coefficients,
                                       rtol=1e-12)

    def test_sequence_protocol(self, fixed_x, reference_params):
        mc = run_monte_carlo(5, fixed_x, reference_params, 3)
        assert len(mc) == 5
        rows = list(mc)
        assert rows[2] == mc[2]
        assert mc[0] == (mc.intercepts[0], mc.slopes[0])

    def test_estimates_read_only(self, fixed_x, reference_params):
        mc = run_monte_carlo(5, fixed_x, reference_params, 3)
        with pytest.raises(ValueError):
            mc.estimates[0, 0] = 0.0

    def test_single_trial_has_nan_se(self, fixed_x, reference_params):
        mc = run_monte_carlo(1, fixed_x, reference_params, 3)
        assert mc.R == 1
        assert np.all(np.isnan(mc.se))

    def test_summary(self, fixed_x, reference_params):
        mc = run_monte_carlo(20, fixed_x, reference_params, 3)
        s = mc.summary()
        assert "MONTE CARLO SIMULATION" in s
        assert "Trial Statistics :" in s
        assert "kind='monte_carlo'" in repr(mc)


class TestMonteCarloValidation:

    @pytest.mark.parametrize("trials", [0, -1])
    def test_trials_below_one(self, fixed_x, reference_params, trials):
        with pytest.raises(InvalidParameterError) as exc:
            run_monte_carlo(trials, fixed_x, reference_params, 0)
        assert exc.value.name == 'trials'

    @pytest.mark.parametrize("trials", [2.5, True, "100"])
    def test_trials_not_integer(self, fixed_x, reference_params, trials):
        with pytest.raises(InvalidParameterError, match="integer"):
            run_monte_carlo(trials, fixed_x, reference_params, 0)

    def test_params_type_checked(self, fixed_x):
        with pytest.raises(InvalidParameterError, match="ModelParameters"):
            run_monte_carlo(10, fixed_x, (-2.0, 1.25, 3.0), 0)

    def test_rng_required(self, fixed_x, reference_params):
        with pytest.raises(InvalidParameterError):
            run_monte_carlo(10, fixed_x, reference_params, None)

    def test_constant_predictor_fails_before_any_trial(self, reference_params):
        with pytest.raises(DegenerateSampleError) as exc:
            run_monte_carlo(10, [0.1, 0.1, 0.1, 0.1], reference_params, 0)
        assert exc.value.reason == 'constant_predictor'
        assert exc.value.trial is None

    def test_two_predictors_degenerate(self, reference_params):
        with pytest.raises(DegenerateSampleError, match="at least 3"):
            run_monte_carlo(10, [0.0, 1.0], reference_params, 0)

    def test_single_predictor_invalid(self, reference_params):
        with pytest.raises(ValidationError):
            run_monte_carlo(10, [1.0], reference_params, 0)


class TestMonteCarloReproducibility:

    def test_same_seed_identical(self, fixed_x, reference_params):
        a = run_monte_carlo(200, fixed_x, reference_params, np.random.default_rng(42))
        b = run_monte_carlo(200, fixed_x, reference_params, np.random.default_rng(42))
        np.testing.assert_array_equal(a.estimates, b.estimates)

    def test_int_seed_equals_generator(self, fixed_x, reference_params):
        a = run_monte_carlo(50, fixed_x, reference_params, 42)
        b = run_monte_carlo(50, fixed_x, reference_params, np.random.default_rng(42))
        np.testing.assert_array_equal(a.estimates, b.estimates)

    def test_different_seeds_differ(self, fixed_x, reference_params):
        a = run_monte_carlo(50, fixed_x, reference_params, 1)
        b = run_monte_carlo(50, fixed_x, reference_params, 2)
        assert not np.array_equal(a.estimates, b.estimates)


class TestMonteCarloAgreement:
    """Empirical spread versus normal-theory standard errors."""

    def test_se_within_fifteen_percent(self, fixed_x, reference_params):
        mc = run_monte_carlo(2000, fixed_x, reference_params, np.random.default_rng(7))

        dx = fixed_x - fixed_x.mean()
        sxx = dx @ dx
        sigma = reference_params.noise_std
        slope_se = sigma / np.sqrt(sxx)
        intercept_se = sigma * np.sqrt(1 / fixed_x.size + fixed_x.mean() ** 2 / sxx)

        assert mc.se[1] == pytest.approx(slope_se, rel=0.15)
        assert mc.se[0] == pytest.approx(intercept_se, rel=0.15)

    def test_unbiased(self, fixed_x, reference_params):
        mc = run_monte_carlo(2000, fixed_x, reference_params, np.random.default_rng(7))
        # 4 Monte Carlo standard errors of the mean
        assert np.all(np.abs(mc.bias) < 4 * mc.se / np.sqrt(mc.R))

    def test_noise_free_has_no_spread(self, fixed_x):
        params = ModelParameters(intercept=1.0, slope=2.0, noise_std=0.0)
        mc = run_monte_carlo(10, fixed_x, params, 0)
        np.testing.assert_allclose(mc.se, [0.0, 0.0], atol=1e-10)
        np.testing.assert_allclose(mc.mean, [1.0, 2.0])

    def test_normal_interval_covers_truth(self, fixed_x, reference_params):
        mc = run_monte_carlo(500, fixed_x, reference_params, 11)
        ci = mc.interval('slope', 0.95, method='normal')
        assert ci.estimate == 1.25
        assert ci.contains(1.25)

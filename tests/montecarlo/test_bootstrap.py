"""
Tests for case-resampling bootstrap of the OLS coefficients.

Verifies seed reproducibility, the full-sample reference, bias/SE
properties, and degenerate-resample handling.
"""

import numpy as np
import pytest

from regsim.core.exceptions import DegenerateSampleError, InvalidParameterError
from regsim.montecarlo import run_bootstrap
from regsim.regression import Sample, fit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def lopsided_sample():
    """Only one distinct predictor value besides zero: resamples often lose it."""
    return Sample.from_arrays([0.0, 0.0, 0.0, 0.0, 1.0],
                              [1.0, 2.0, 1.5, 0.5, 4.0])


# ---------------------------------------------------------------------------
# Tests: Ordinary bootstrap
# ---------------------------------------------------------------------------

class TestBootstrap:

    def test_shapes(self, simple_sample):
        bs = run_bootstrap(200, simple_sample, 42)
        assert bs.kind == 'bootstrap'
        assert bs.R == 200
        assert bs.estimates.shape == (200, 2)
        assert bs.se.shape == (2,)

    def test_reference_is_full_sample_fit(self, simple_sample):
        bs = run_bootstrap(50, simple_sample, 42)
        np.testing.assert_array_equal(bs.reference, fit(simple_sample).coefficients)

    def test_trials_draw_indices_in_order(self, simple_sample):
        bs = run_bootstrap(2, simple_sample, np.random.default_rng(5))
        gen = np.random.default_rng(5)
        for b in range(2):
            idx = gen.choice(100, size=100, replace=True)
            expected = fit(simple_sample.take(idx)).coefficients
            np.testing.assert_allclose(bs.estimates[b], expected, rtol=1e-12)

    def test_mean_close_to_reference(self, simple_sample):
        bs = run_bootstrap(1000, simple_sample, 42)
        assert np.all(np.abs(bs.bias) < 4 * bs.se / np.sqrt(bs.R) + 1e-3)

    def test_se_comparable_to_analytic(self, simple_sample):
        bs = run_bootstrap(1000, simple_sample, 42)
        model = fit(simple_sample)
        np.testing.assert_allclose(bs.se, model.standard_errors, rtol=0.3)

    def test_summary(self, simple_sample):
        s = run_bootstrap(30, simple_sample, 42).summary()
        assert "ORDINARY NONPARAMETRIC BOOTSTRAP" in s


class TestBootstrapReproducibility:

    def test_same_seed_bit_identical(self, simple_sample):
        a = run_bootstrap(1000, simple_sample, np.random.default_rng(42))
        b = run_bootstrap(1000, simple_sample, np.random.default_rng(42))
        np.testing.assert_array_equal(a.estimates, b.estimates)
        np.testing.assert_array_equal(a.se, b.se)

    def test_different_seeds_differ(self, simple_sample):
        a = run_bootstrap(100, simple_sample, 1)
        b = run_bootstrap(100, simple_sample, 2)
        assert not np.array_equal(a.estimates, b.estimates)


class TestBootstrapIntervals:

    def test_percentile_interval(self, simple_sample):
        bs = run_bootstrap(1000, simple_sample, 42)
        ci = bs.percentile_interval('slope', 0.95)
        assert ci.lower == pytest.approx(np.quantile(bs.slopes, 0.025))
        assert ci.upper == pytest.approx(np.quantile(bs.slopes, 0.975))
        assert ci.estimate == bs.reference[1]
        assert ci.contains(bs.reference[1])

    def test_normal_interval_bias_corrected(self, simple_sample):
        bs = run_bootstrap(500, simple_sample, 42)
        ci = bs.interval('intercept', 0.90, method='normal')
        center = 2 * bs.reference[0] - bs.mean[0]
        assert (ci.lower + ci.upper) / 2 == pytest.approx(center)

    def test_higher_level_is_wider(self, simple_sample):
        bs = run_bootstrap(500, simple_sample, 42)
        assert (bs.percentile_interval('slope', 0.99).width
                >= bs.percentile_interval('slope', 0.80).width)

    def test_unknown_coefficient(self, simple_sample):
        bs = run_bootstrap(20, simple_sample, 42)
        with pytest.raises(InvalidParameterError):
            bs.percentile_interval('x2')

    def test_unknown_method(self, simple_sample):
        bs = run_bootstrap(20, simple_sample, 42)
        with pytest.raises(InvalidParameterError, match="method"):
            bs.interval('slope', method='bca')

    def test_bad_level(self, simple_sample):
        bs = run_bootstrap(20, simple_sample, 42)
        with pytest.raises(InvalidParameterError):
            bs.percentile_interval('slope', 1.2)


class TestBootstrapDegenerate:

    def test_raise_reports_trial(self, lopsided_sample):
        with pytest.raises(DegenerateSampleError) as exc:
            run_bootstrap(200, lopsided_sample, 0)
        assert exc.value.trial is not None
        assert exc.value.reason == 'constant_predictor'
        assert f"Trial {exc.value.trial} of 200" in str(exc.value)

    def test_skip_counts_and_warns(self, lopsided_sample):
        with pytest.warns(RuntimeWarning, match="degenerate trials"):
            bs = run_bootstrap(200, lopsided_sample, 0, on_degenerate='skip')
        assert bs.n_skipped > 0
        assert bs.R + bs.n_skipped == 200
        assert bs.trials_requested == 200
        assert len(bs.info['skipped_trials']) == bs.n_skipped
        assert bs.warnings and "Skipped" in bs.warnings[0]

    def test_degenerate_observed_sample(self):
        sample = Sample.from_arrays([1.0, 1.0, 1.0], [1.0, 2.0, 3.0])
        with pytest.raises(DegenerateSampleError) as exc:
            run_bootstrap(10, sample, 0)
        assert exc.value.trial is None

    def test_sample_type_checked(self, simple_sample):
        with pytest.raises(InvalidParameterError, match="Sample"):
            run_bootstrap(10, (simple_sample.x, simple_sample.y), 0)

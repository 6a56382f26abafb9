"""
Public trial-run functions.

run_monte_carlo and run_bootstrap differ only in how each trial's Sample
is generated; both hand a generator function to run_trials, which owns
the single generate-and-fit loop.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from regsim.core.exceptions import InvalidParameterError
from regsim.core.validation import check_positive_int, check_rng
from regsim.montecarlo.backends.cpu import CPUTrialBackend
from regsim.montecarlo.design import TrialDesign
from regsim.montecarlo.solution import TrialCollection
from regsim.regression.design import Sample
from regsim.regression.solvers import check_fittable, fit
from regsim.simulation.design import ModelParameters
from regsim.simulation.solvers import check_predictors, simulate_response


def run_trials(
    trials: int,
    generate: Callable[[np.random.Generator], Sample],
    rng: np.random.Generator | int,
    *,
    reference: ArrayLike | None = None,
    kind: str = "custom",
    on_degenerate: str = "raise",
    fit_backend: str = "auto",
) -> TrialCollection:
    """
    Repeatedly generate a Sample, fit it, and collect the coefficients.

    Args:
        trials: Number of trials (>= 1).
        generate: fn(rng) -> Sample, called once per trial in order.
        rng: numpy Generator (stream is continued) or integer seed.
        reference: (intercept, slope) to measure bias against.
        kind: "monte_carlo", "bootstrap" or "custom" (reporting only).
        on_degenerate: "raise" (default) aborts on the first degenerate
            trial; "skip" drops it, counts it in n_skipped and warns.
        fit_backend: Regression backend for every fit.

    Returns:
        TrialCollection with one (intercept, slope) row per completed trial.

    Raises:
        InvalidParameterError: If trials < 1 or other inputs are invalid.
        DegenerateSampleError: If a trial cannot be fitted (with the
            failing trial index) and on_degenerate is "raise".
    """
    design = TrialDesign.for_trials(
        trials, generate, rng,
        reference=reference,
        kind=kind,
        on_degenerate=on_degenerate,
        fit_backend=fit_backend,
    )
    result = CPUTrialBackend().solve(design)
    return TrialCollection(_result=result, _design=design)


def run_monte_carlo(
    trials: int,
    x: ArrayLike,
    params: ModelParameters,
    rng: np.random.Generator | int,
    *,
    on_degenerate: str = "raise",
    fit_backend: str = "auto",
) -> TrialCollection:
    """
    Monte Carlo sampling distribution of the OLS coefficients.

    Every trial keeps the predictors x fixed, draws fresh N(0, noise_std²)
    noise from the continued rng stream, and refits.

    Args:
        trials: Number of trials (>= 1).
        x: Fixed predictor values shared by all trials.
        params: True model parameters (also the bias reference).
        rng: numpy Generator or integer seed.

    Returns:
        TrialCollection of kind "monte_carlo".

    Raises:
        InvalidParameterError: If trials < 1 or params are invalid.
        DegenerateSampleError: If x cannot support a fit (n < 3 or constant).

    Example:
        >>> params = ModelParameters(intercept=-2, slope=1.25, noise_std=3)
        >>> mc = run_monte_carlo(5000, sample.x, params, rng=7)
        >>> mc.se  # compare with fit(sample).standard_errors
    """
    trials = check_positive_int(trials, 'trials')
    x_arr = check_predictors(x)
    if not isinstance(params, ModelParameters):
        raise InvalidParameterError(
            f"params: expected ModelParameters, got {type(params).__name__}",
            name='params', value=params,
        )
    rng = check_rng(rng)

    # The predictors never change, so a degenerate x fails every trial
    check_fittable(Sample.from_arrays(x_arr, np.zeros_like(x_arr)))

    def generate(trial_rng: np.random.Generator) -> Sample:
        return simulate_response(x_arr, params, trial_rng)

    return run_trials(
        trials, generate, rng,
        reference=params.coefficients,
        kind="monte_carlo",
        on_degenerate=on_degenerate,
        fit_backend=fit_backend,
    )


def run_bootstrap(
    trials: int,
    sample: Sample,
    rng: np.random.Generator | int,
    *,
    on_degenerate: str = "raise",
    fit_backend: str = "auto",
) -> TrialCollection:
    """
    Nonparametric (case-resampling) bootstrap of the OLS coefficients.

    Every trial draws n row indices uniformly with replacement, refits
    on the resampled rows, and records the coefficients. The full-sample
    fit is the bias reference.

    Args:
        trials: Number of bootstrap replicates (>= 1).
        sample: Observed Sample.
        rng: numpy Generator or integer seed.

    Returns:
        TrialCollection of kind "bootstrap".

    Raises:
        InvalidParameterError: If trials < 1.
        DegenerateSampleError: If the observed sample cannot be fitted,
            or a resample cannot be fitted and on_degenerate is "raise".
    """
    trials = check_positive_int(trials, 'trials')
    if not isinstance(sample, Sample):
        raise InvalidParameterError(
            f"sample: expected Sample, got {type(sample).__name__}",
            name='sample', value=sample,
        )
    rng = check_rng(rng)

    t0 = fit(sample, backend=fit_backend).coefficients
    n = sample.n

    def generate(trial_rng: np.random.Generator) -> Sample:
        indices = trial_rng.choice(n, size=n, replace=True)
        return sample.take(indices)

    return run_trials(
        trials, generate, rng,
        reference=t0,
        kind="bootstrap",
        on_degenerate=on_degenerate,
        fit_backend=fit_backend,
    )

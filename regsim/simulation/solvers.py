"""
Public simulation functions.

Every draw consumes the caller's Generator in a fixed order (predictors
first, then noise), so a seeded stream always reproduces the same Sample.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regsim.core.exceptions import InvalidParameterError
from regsim.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_min_samples,
    check_rng,
)
from regsim.core.defaults import MIN_SAMPLE_SIZE
from regsim.regression.design import Sample
from regsim.simulation.design import ModelParameters, SimulationDesign


def simulate(
    n: int,
    x_range: tuple[float, float],
    params: ModelParameters,
    rng: np.random.Generator | int,
) -> Sample:
    """
    Draw a synthetic Sample from the normal linear model.

    x_i ~ Uniform(x_range), e_i ~ N(0, noise_std²),
    y_i = intercept + slope·x_i + e_i.

    Args:
        n: Number of observations (>= 2)
        x_range: (min, max) of the uniform predictor distribution
        params: True model parameters
        rng: numpy Generator (stream is continued) or integer seed

    Returns:
        Sample of length n

    Raises:
        InvalidParameterError: On bad n, x_range, params or rng

    Example:
        >>> params = ModelParameters(intercept=-2, slope=1.25, noise_std=3)
        >>> sample = simulate(50, (0, 10), params, rng=7)
    """
    design = SimulationDesign.for_simulation(n, x_range, params)
    rng = check_rng(rng)

    x = rng.uniform(design.x_min, design.x_max, size=design.n)
    y = _draw_response(x, design.params, rng)
    return Sample.from_arrays(x, y)


def simulate_response(
    x: ArrayLike,
    params: ModelParameters,
    rng: np.random.Generator | int,
) -> Sample:
    """
    Draw fresh responses for fixed predictor values.

    Args:
        x: Predictor values, kept as given
        params: True model parameters
        rng: numpy Generator (stream is continued) or integer seed

    Raises:
        InvalidParameterError: On bad params or rng
        ValidationError: If x is not a finite 1-D array of length >= 2
    """
    x_arr = check_predictors(x)
    if not isinstance(params, ModelParameters):
        raise InvalidParameterError(
            f"params: expected ModelParameters, got {type(params).__name__}",
            name='params', value=params,
        )
    rng = check_rng(rng)
    return Sample.from_arrays(x_arr, _draw_response(x_arr, params, rng))


def check_predictors(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """Validate a fixed predictor vector for repeated simulation."""
    x_arr = check_array(x, 'x')
    check_1d(x_arr, 'x')
    check_finite(x_arr, 'x')
    check_min_samples(x_arr, MIN_SAMPLE_SIZE, 'x')
    return x_arr


def _draw_response(
    x: NDArray[np.floating[Any]],
    params: ModelParameters,
    rng: np.random.Generator,
) -> NDArray[np.floating[Any]]:
    noise = rng.normal(0.0, params.noise_std, size=x.shape[0])
    return params.mean_response(x) + noise

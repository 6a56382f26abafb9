"""
Design classes for data simulation.

ModelParameters holds the true line and noise level; SimulationDesign
bundles everything a draw needs. Both are immutable and validated at
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from regsim.core.defaults import MIN_SAMPLE_SIZE
from regsim.core.exceptions import InvalidParameterError
from regsim.core.validation import check_finite_scalar, check_positive_int


@dataclass(frozen=True)
class ModelParameters:
    """
    True parameters of y = intercept + slope·x + e, e ~ N(0, noise_std²).

    Attributes:
        intercept: True intercept
        slope: True slope
        noise_std: Standard deviation of the Gaussian noise, >= 0
    """
    intercept: float
    slope: float
    noise_std: float

    def __post_init__(self):
        intercept = check_finite_scalar(self.intercept, 'intercept')
        slope = check_finite_scalar(self.slope, 'slope')
        noise_std = check_finite_scalar(self.noise_std, 'noise_std')
        if noise_std < 0:
            raise InvalidParameterError(
                f"noise_std: must be >= 0, got {noise_std}",
                name='noise_std', value=noise_std,
            )
        object.__setattr__(self, 'intercept', intercept)
        object.__setattr__(self, 'slope', slope)
        object.__setattr__(self, 'noise_std', noise_std)

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """(intercept, slope) in the same order as fitted coefficients."""
        return np.array([self.intercept, self.slope], dtype=np.float64)

    def mean_response(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """E[y | x] = intercept + slope·x."""
        return self.intercept + self.slope * x


@dataclass(frozen=True)
class SimulationDesign:
    """
    Frozen design for drawing one synthetic Sample.

    Attributes:
        n: Number of observations
        x_min, x_max: Bounds of the uniform predictor distribution
        params: True model parameters
    """
    n: int
    x_min: float
    x_max: float
    params: ModelParameters

    @classmethod
    def for_simulation(
        cls,
        n: int,
        x_range: tuple[float, float],
        params: ModelParameters,
    ) -> SimulationDesign:
        """
        Create a simulation design with validation.

        Args:
            n: Number of observations. Must be >= 2 to form a Sample.
            x_range: (min, max) of the predictor, min < max.
            params: True model parameters.

        Raises:
            InvalidParameterError: If n, x_range or params are invalid.
        """
        n = check_positive_int(n, 'n', minimum=MIN_SAMPLE_SIZE)

        try:
            x_min, x_max = x_range
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(
                f"x_range: expected a (min, max) pair, got {x_range!r}",
                name='x_range', value=x_range,
            ) from e
        x_min = check_finite_scalar(x_min, 'x_range.min')
        x_max = check_finite_scalar(x_max, 'x_range.max')
        if x_min >= x_max:
            raise InvalidParameterError(
                f"x_range: min must be < max, got ({x_min}, {x_max})",
                name='x_range', value=x_range,
            )

        if not isinstance(params, ModelParameters):
            raise InvalidParameterError(
                f"params: expected ModelParameters, got {type(params).__name__}",
                name='params', value=params,
            )

        return cls(n=n, x_min=x_min, x_max=x_max, params=params)

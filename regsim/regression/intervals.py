"""
Interval estimates for a fitted simple linear regression.

All intervals are two-sided and use Student's t with n - 2 degrees of
freedom:

    confidence_interval     coefficient ± t · SE(coefficient)
    mean_response_interval  ŷ(x₀) ± t · s · sqrt(1/n + (x₀ - x̄)² / Sxx)
    prediction_interval     ŷ(x₀) ± t · s · sqrt(1 + 1/n + (x₀ - x̄)² / Sxx)

The leading 1 in the prediction variance is the new observation's own
noise, so a prediction interval is always strictly wider than both the
mean-response interval and the naive ŷ ± t·s band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy import stats as sp_stats

from regsim.core.defaults import DEFAULT_CONF_LEVEL
from regsim.core.exceptions import InvalidParameterError
from regsim.core.validation import check_level, check_finite_scalar

if TYPE_CHECKING:
    from regsim.regression.solution import FittedModel


_COEFFICIENT_INDEX = {'intercept': 0, 'slope': 1}


@dataclass(frozen=True)
class ConfidenceInterval:
    """Interval for one regression coefficient."""
    parameter: str
    estimate: float
    lower: float
    upper: float
    level: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def __str__(self):
        pct = self.level * 100
        return (f"{self.parameter}: {self.estimate:.6f} "
                f"{pct:g}% CI [{self.lower:.6f}, {self.upper:.6f}]")


@dataclass(frozen=True)
class PredictionInterval:
    """Interval for the response at a new predictor value."""
    new_x: float
    estimate: float
    lower: float
    upper: float
    level: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def __str__(self):
        pct = self.level * 100
        return (f"x={self.new_x:g}: {self.estimate:.6f} "
                f"{pct:g}% [{self.lower:.6f}, {self.upper:.6f}]")


def t_quantile(level: float, df: int) -> float:
    """Two-sided critical value t_{(1 + level)/2, df}."""
    return float(sp_stats.t.ppf(0.5 + level / 2.0, df))


def confidence_interval(
    model: 'FittedModel',
    coefficient: str,
    level: float = DEFAULT_CONF_LEVEL,
) -> ConfidenceInterval:
    """
    Confidence interval for the intercept or slope.

    Args:
        model: A fitted model
        coefficient: 'intercept' or 'slope'
        level: Confidence level in (0, 1)

    Raises:
        InvalidParameterError: Unknown coefficient or level outside (0, 1)
    """
    if coefficient not in _COEFFICIENT_INDEX:
        raise InvalidParameterError(
            f"coefficient: must be 'intercept' or 'slope', got {coefficient!r}",
            name='coefficient', value=coefficient,
        )
    level = check_level(level)

    idx = _COEFFICIENT_INDEX[coefficient]
    estimate = float(model.coefficients[idx])
    half_width = t_quantile(level, model.df_residual) * float(model.standard_errors[idx])

    return ConfidenceInterval(
        parameter=coefficient,
        estimate=estimate,
        lower=estimate - half_width,
        upper=estimate + half_width,
        level=level,
    )


def prediction_interval(
    model: 'FittedModel',
    new_x: float,
    level: float = DEFAULT_CONF_LEVEL,
) -> PredictionInterval:
    """
    Prediction interval for a single new response at new_x.

    Accounts for both the noise of the new observation and the
    uncertainty in the estimated line.

    Raises:
        InvalidParameterError: Non-finite new_x or level outside (0, 1)
    """
    return _response_interval(model, new_x, level, include_noise=True)


def mean_response_interval(
    model: 'FittedModel',
    new_x: float,
    level: float = DEFAULT_CONF_LEVEL,
) -> PredictionInterval:
    """
    Confidence interval for the mean response E[y | new_x].

    Raises:
        InvalidParameterError: Non-finite new_x or level outside (0, 1)
    """
    return _response_interval(model, new_x, level, include_noise=False)


def _response_interval(
    model: 'FittedModel',
    new_x: float,
    level: float,
    include_noise: bool,
) -> PredictionInterval:
    new_x = check_finite_scalar(new_x, 'new_x')
    level = check_level(level)

    point = model.predict(new_x)
    leverage = 1.0 / model.n + (new_x - model.x_mean) ** 2 / model.sxx
    factor = 1.0 + leverage if include_noise else leverage
    half_width = (t_quantile(level, model.df_residual)
                  * model.residual_se * float(np.sqrt(factor)))

    return PredictionInterval(
        new_x=new_x,
        estimate=point,
        lower=point - half_width,
        upper=point + half_width,
        level=level,
    )

"""
Regression solution types.

Contains the parameter payload and the user-facing FittedModel wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from regsim.core.defaults import DEFAULT_CONF_LEVEL
from regsim.core.result import Result

if TYPE_CHECKING:
    from regsim.regression.design import Sample
    from regsim.regression.intervals import ConfidenceInterval, PredictionInterval


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends. Index 0 of the
    coefficient arrays is the intercept, index 1 the slope.
    """
    coefficients: NDArray[np.floating[Any]]
    standard_errors: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    residual_se: float
    df_residual: int
    x_mean: float
    sxx: float


@dataclass
class FittedModel:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors
    for the estimates, their standard errors and interval helpers.
    """
    _result: Result[LinearParams]
    _sample: 'Sample'

    _t_statistics: NDArray[np.floating[Any]] | None = None

    # --- Estimates ---

    @property
    def intercept_estimate(self) -> float:
        return float(self._result.params.coefficients[0])

    @property
    def slope_estimate(self) -> float:
        return float(self._result.params.coefficients[1])

    @property
    def intercept_se(self) -> float:
        return float(self._result.params.standard_errors[0])

    @property
    def slope_se(self) -> float:
        return float(self._result.params.standard_errors[1])

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """(intercept, slope)."""
        return self._result.params.coefficients

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Normal-theory standard errors of (intercept, slope).

        SE(b1) = s / sqrt(Sxx)
        SE(b0) = s * sqrt(1/n + xbar² / Sxx)
        """
        return self._result.params.standard_errors

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    # --- Fit statistics ---

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def residual_se(self) -> float:
        """Residual standard error sqrt(RSS / (n - 2))."""
        return self._result.params.residual_se

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def x_mean(self) -> float:
        return self._result.params.x_mean

    @property
    def sxx(self) -> float:
        return self._result.params.sxx

    @property
    def n(self) -> int:
        return self._sample.n

    @property
    def sample(self) -> 'Sample':
        return self._sample

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for H0: coefficient = 0."""
        if self._t_statistics is not None:
            return self._t_statistics

        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            # A perfect fit has zero SE; report NaN rather than inf
            t = np.where(np.isfinite(t), t, np.nan)
        self._t_statistics = t
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from t(n - 2)."""
        return 2.0 * sp_stats.t.sf(np.abs(self.t_statistics), self.df_residual)

    # --- Intervals ---

    def confidence_interval(
        self, coefficient: str, level: float = DEFAULT_CONF_LEVEL,
    ) -> 'ConfidenceInterval':
        """See regsim.regression.confidence_interval."""
        from regsim.regression.intervals import confidence_interval
        return confidence_interval(self, coefficient, level)

    def prediction_interval(
        self, new_x: float, level: float = DEFAULT_CONF_LEVEL,
    ) -> 'PredictionInterval':
        """See regsim.regression.prediction_interval."""
        from regsim.regression.intervals import prediction_interval
        return prediction_interval(self, new_x, level)

    def predict(self, new_x: float | NDArray) -> float | NDArray:
        """Point prediction b0 + b1 * new_x."""
        b0, b1 = self.coefficients
        result = b0 + b1 * np.asarray(new_x, dtype=np.float64)
        return float(result) if result.ndim == 0 else result

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Simple Linear Regression Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual Std. Error: {self.residual_se:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'':<12} {'Estimate':>12} {'Std.Error':>12} {'t value':>9} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]

        names = ('(Intercept)', 'x')
        for name, coef, se, t, p in zip(
            names, self.coefficients, self.standard_errors,
            self.t_statistics, self.p_values,
        ):
            t_str = f"{t:9.3f}" if not np.isnan(t) else "       NA"
            p_str = f"{p:10.4g}" if not np.isnan(p) else "        NA"
            lines.append(f"{name:<12} {coef:12.6f} {se:12.6f} {t_str} {p_str}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FittedModel(n={self.n}, intercept={self.intercept_estimate:.4f}, "
            f"slope={self.slope_estimate:.4f}, r_squared={self.r_squared:.4f})"
        )

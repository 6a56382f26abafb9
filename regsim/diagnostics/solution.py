"""
Residual diagnostics result type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class DiagnosticsSummary:
    """
    Distribution of the residuals and their relationship to the predictor.

    Plotting collaborators consume `pairs` (residuals vs predictor) and
    `standardized_residuals` (normal Q-Q); the scalar statistics give the
    same checks numerically.

    Attributes:
        residual_mean: Mean residual (zero up to rounding for OLS with intercept)
        residual_std: Sample standard deviation of the residuals, ddof=1
        pairs: (predictor_i, residual_i) in input order, shape (n, 2)
        standardized_residuals: residual_i / residual standard error
        skewness: Sample skewness of the residuals (0 under normality)
        excess_kurtosis: Fisher kurtosis of the residuals (0 under normality)
        shapiro_statistic: Shapiro-Wilk W
        shapiro_p_value: Shapiro-Wilk p-value (small means non-normal)
        lag1_autocorrelation: Correlation of consecutive residuals in input
            order (near 0 under independence)
        spread_correlation: Spearman correlation of |residual| with the
            predictor (near 0 under homoscedasticity)
    """
    residual_mean: float
    residual_std: float
    pairs: NDArray[np.floating[Any]]
    standardized_residuals: NDArray[np.floating[Any]]
    skewness: float
    excess_kurtosis: float
    shapiro_statistic: float
    shapiro_p_value: float
    lag1_autocorrelation: float
    spread_correlation: float

    @property
    def n(self) -> int:
        return self.pairs.shape[0]

    @property
    def predictor(self) -> NDArray[np.floating[Any]]:
        return self.pairs[:, 0]

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self.pairs[:, 1]

    def summary(self) -> str:
        """Plain-text diagnostics report."""
        lines = [
            "Residual Diagnostics",
            "=" * 60,
            f"Observations: {self.n}",
            f"Residual mean: {self.residual_mean:.6g}",
            f"Residual std. dev.: {self.residual_std:.6f}",
            "",
            "Normality:",
            f"  Skewness: {self.skewness:.4f}",
            f"  Excess kurtosis: {self.excess_kurtosis:.4f}",
            f"  Shapiro-Wilk W = {self.shapiro_statistic:.4f}, "
            f"p-value = {self.shapiro_p_value:.4g}",
            "Independence:",
            f"  Lag-1 autocorrelation: {self.lag1_autocorrelation:.4f}",
            "Constant variance:",
            f"  Spearman(|residual|, x): {self.spread_correlation:.4f}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DiagnosticsSummary(n={self.n}, "
            f"residual_mean={self.residual_mean:.3g}, "
            f"residual_std={self.residual_std:.4f})"
        )

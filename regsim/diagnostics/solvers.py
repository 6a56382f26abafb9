"""
Residual diagnostics for a fitted simple linear regression.

Pure computation: no randomness, no I/O. Statistics that are undefined
for the given residuals (for example every residual is zero after a
perfect fit) are reported as NaN instead of raising.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from regsim.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
)
from regsim.diagnostics.solution import DiagnosticsSummary
from regsim.regression.solution import FittedModel


def diagnose(
    model: FittedModel,
    predictor: ArrayLike | None = None,
) -> DiagnosticsSummary:
    """
    Summarize residuals and their relationship to the predictor.

    Args:
        model: A fitted model
        predictor: Predictor values paired with model.residuals by position.
            Defaults to the predictor the model was fitted on.

    Returns:
        DiagnosticsSummary

    Raises:
        ValidationError: If predictor is not a finite 1-D numeric array
        DimensionError: If predictor and residuals differ in length
    """
    residuals = model.residuals
    if predictor is None:
        x = model.sample.x
    else:
        x = check_array(predictor, 'predictor')
        check_1d(x, 'predictor')
        check_finite(x, 'predictor')
        check_consistent_length(x, residuals, names=('predictor', 'residuals'))

    residual_std = float(np.std(residuals, ddof=1))
    spread = residual_std > 0.0

    with np.errstate(divide='ignore', invalid='ignore'):
        standardized = residuals / model.residual_se

    if spread:
        skewness = float(sp_stats.skew(residuals))
        kurtosis = float(sp_stats.kurtosis(residuals, fisher=True))
        shapiro_w, shapiro_p = sp_stats.shapiro(residuals)
        shapiro_w, shapiro_p = float(shapiro_w), float(shapiro_p)
    else:
        skewness = kurtosis = shapiro_w = shapiro_p = float('nan')

    return DiagnosticsSummary(
        residual_mean=float(np.mean(residuals)),
        residual_std=residual_std,
        pairs=np.column_stack([x, residuals]),
        standardized_residuals=standardized,
        skewness=skewness,
        excess_kurtosis=kurtosis,
        shapiro_statistic=shapiro_w,
        shapiro_p_value=shapiro_p,
        lag1_autocorrelation=_lag1_autocorrelation(residuals),
        spread_correlation=_spread_correlation(x, residuals),
    )


def _lag1_autocorrelation(e: NDArray[np.floating[Any]]) -> float:
    """r1 = Σ (e_t - ē)(e_{t-1} - ē) / Σ (e_t - ē)²."""
    centered = e - np.mean(e)
    denom = float(centered @ centered)
    if denom == 0.0:
        return float('nan')
    return float(centered[1:] @ centered[:-1]) / denom


def _spread_correlation(
    x: NDArray[np.floating[Any]],
    e: NDArray[np.floating[Any]],
) -> float:
    abs_e = np.abs(e)
    if np.all(abs_e == abs_e[0]) or np.all(x == x[0]):
        return float('nan')
    rho, _ = sp_stats.spearmanr(abs_e, x)
    return float(rho)

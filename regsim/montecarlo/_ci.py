"""
Empirical intervals from trial estimates.

- percentile: [Q(alpha/2), Q(1-alpha/2)] of the trial estimates
- normal: reference-centered normal approximation,
  2*reference - mean(t) ± z_{1-alpha/2} * se (bias-corrected, as in
  R's boot.ci type="norm"); centered at mean(t) without a reference
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats


def compute_interval(
    t: NDArray,
    level: float,
    method: str,
    reference: float | None,
    se: float,
) -> tuple[float, float]:
    """
    Interval for one column of trial estimates.

    Args:
        t: Trial estimates for one coefficient, shape (R,).
        level: Confidence level in (0, 1).
        method: "percentile" or "normal".
        reference: Reference value for the normal method, or None.
        se: Standard deviation of t (ddof=1).

    Returns:
        (lower, upper)
    """
    alpha = 1.0 - level
    if method == "percentile":
        return _ci_percentile(t, alpha)
    if method == "normal":
        return _ci_normal(t, alpha, reference, se)
    raise ValueError(f"Unknown interval method: {method!r}")


def _ci_percentile(t: NDArray, alpha: float) -> tuple[float, float]:
    lower = float(np.quantile(t, alpha / 2.0))
    upper = float(np.quantile(t, 1.0 - alpha / 2.0))
    return lower, upper


def _ci_normal(
    t: NDArray,
    alpha: float,
    reference: float | None,
    se: float,
) -> tuple[float, float]:
    z = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    mean = float(np.mean(t))
    center = mean if reference is None else 2.0 * reference - mean
    return center - z * se, center + z * se

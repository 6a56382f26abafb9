"""
Analytic versus empirical standard errors.

Puts the normal-theory standard errors from one fit next to the
spread of a Monte Carlo or bootstrap TrialCollection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from regsim.montecarlo._common import COEFFICIENT_NAMES

if TYPE_CHECKING:
    from regsim.montecarlo.solution import TrialCollection
    from regsim.regression.solution import FittedModel


@dataclass(frozen=True)
class StandardErrorComparison:
    """
    Analytic and empirical standard errors of (intercept, slope).

    ratio = empirical / analytic; values near 1 mean the normal-theory
    formulas describe the sampling distribution well.
    """
    analytic: NDArray[np.floating[Any]]
    empirical: NDArray[np.floating[Any]]
    ratio: NDArray[np.floating[Any]]
    kind: str
    R: int

    def __str__(self):
        lines = [
            f"Standard errors ({self.kind}, R={self.R})",
            f"{'':>10s} {'analytic':>12s} {'empirical':>12s} {'ratio':>8s}",
        ]
        for j, name in enumerate(COEFFICIENT_NAMES):
            lines.append(
                f"{name:>10s} {self.analytic[j]:12.5f} "
                f"{self.empirical[j]:12.5f} {self.ratio[j]:8.3f}"
            )
        return "\n".join(lines)


def compare_standard_errors(
    model: 'FittedModel',
    collection: 'TrialCollection',
) -> StandardErrorComparison:
    """
    Compare a fit's analytic standard errors with trial-based ones.

    Args:
        model: A single fit, e.g. on the observed or first simulated sample
        collection: Monte Carlo or bootstrap trials for the same setting

    Returns:
        StandardErrorComparison
    """
    analytic = np.asarray(model.standard_errors, dtype=np.float64)
    empirical = np.asarray(collection.se, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = empirical / analytic
    return StandardErrorComparison(
        analytic=analytic,
        empirical=empirical,
        ratio=ratio,
        kind=collection.kind,
        R=collection.R,
    )

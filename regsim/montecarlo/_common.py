"""
Common data structures for Monte Carlo and bootstrap trials.

TrialParams is the parameter payload wrapped by Result[P] and exposed
through TrialCollection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


# Column order of every estimates matrix
COEFFICIENT_NAMES = ('intercept', 'slope')


@dataclass(frozen=True)
class TrialParams:
    """
    Parameter payload for a trial run.

    - estimates: one (intercept, slope) row per completed trial, in trial order
    - reference: the value the trials scatter around (true parameters for
      Monte Carlo, full-sample fit for bootstrap), or None
    - bias: mean(estimates) - reference, or None without a reference
    - se: sd(estimates) with ddof=1 (NaN for a single trial)
    """
    estimates: NDArray[np.floating[Any]]       # shape (R, 2)
    R: int                                      # completed trials
    trials_requested: int
    n_skipped: int
    mean: NDArray[np.floating[Any]]            # shape (2,)
    se: NDArray[np.floating[Any]]              # shape (2,)
    reference: NDArray[np.floating[Any]] | None
    bias: NDArray[np.floating[Any]] | None

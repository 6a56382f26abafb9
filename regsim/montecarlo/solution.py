"""
Solution wrapper for trial runs.

TrialCollection wraps Result[TrialParams] and provides convenient
accessors, empirical intervals and R-style summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from regsim.core.defaults import DEFAULT_CONF_LEVEL
from regsim.core.exceptions import InvalidParameterError
from regsim.core.result import Result
from regsim.core.validation import check_level
from regsim.montecarlo._ci import compute_interval
from regsim.montecarlo._common import COEFFICIENT_NAMES, TrialParams

if TYPE_CHECKING:
    from regsim.montecarlo.design import TrialDesign
    from regsim.regression.intervals import ConfidenceInterval


@dataclass
class TrialCollection:
    """
    User-facing results of a Monte Carlo or bootstrap run.

    An ordered, read-only sequence of (intercept_estimate, slope_estimate)
    pairs, one per completed trial, plus their summary statistics.
    """
    _result: Result[TrialParams]
    _design: 'TrialDesign'

    # --- Trial estimates ---

    @property
    def estimates(self) -> NDArray[np.floating[Any]]:
        """Trial estimates, shape (R, 2): column 0 intercept, column 1 slope."""
        return self._result.params.estimates

    @property
    def intercepts(self) -> NDArray[np.floating[Any]]:
        return self.estimates[:, 0]

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        return self.estimates[:, 1]

    @property
    def R(self) -> int:
        """Number of completed trials."""
        return self._result.params.R

    @property
    def trials_requested(self) -> int:
        return self._result.params.trials_requested

    @property
    def n_skipped(self) -> int:
        """Degenerate trials dropped under on_degenerate='skip'."""
        return self._result.params.n_skipped

    # --- Summary statistics ---

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        """Mean (intercept, slope) across trials."""
        return self._result.params.mean

    @property
    def se(self) -> NDArray[np.floating[Any]]:
        """Empirical standard error: sd of trial estimates, ddof=1."""
        return self._result.params.se

    @property
    def reference(self) -> NDArray[np.floating[Any]] | None:
        """True parameters (Monte Carlo) or full-sample fit (bootstrap)."""
        return self._result.params.reference

    @property
    def bias(self) -> NDArray[np.floating[Any]] | None:
        """mean - reference, or None without a reference."""
        return self._result.params.bias

    def percentile_interval(
        self,
        coefficient: str,
        level: float = DEFAULT_CONF_LEVEL,
    ) -> 'ConfidenceInterval':
        """Percentile interval of the trial estimates for one coefficient."""
        return self.interval(coefficient, level, method="percentile")

    def interval(
        self,
        coefficient: str,
        level: float = DEFAULT_CONF_LEVEL,
        method: str = "percentile",
    ) -> 'ConfidenceInterval':
        """
        Empirical interval for one coefficient.

        Args:
            coefficient: 'intercept' or 'slope'
            level: Confidence level in (0, 1)
            method: 'percentile' or 'normal'

        Raises:
            InvalidParameterError: Unknown coefficient or method, bad level
        """
        from regsim.regression.intervals import ConfidenceInterval

        if coefficient not in COEFFICIENT_NAMES:
            raise InvalidParameterError(
                f"coefficient: must be 'intercept' or 'slope', got {coefficient!r}",
                name='coefficient', value=coefficient,
            )
        if method not in ("percentile", "normal"):
            raise InvalidParameterError(
                f"method: must be 'percentile' or 'normal', got {method!r}",
                name='method', value=method,
            )
        level = check_level(level)

        j = COEFFICIENT_NAMES.index(coefficient)
        ref = None if self.reference is None else float(self.reference[j])
        lower, upper = compute_interval(
            self.estimates[:, j], level, method, ref, float(self.se[j]),
        )
        estimate = float(self.mean[j]) if ref is None else ref
        return ConfidenceInterval(
            parameter=coefficient,
            estimate=estimate,
            lower=lower,
            upper=upper,
            level=level,
        )

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return self.R

    def __getitem__(self, index: int) -> tuple[float, float]:
        row = self.estimates[index]
        return float(row[0]), float(row[1])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for row in self.estimates:
            yield float(row[0]), float(row[1])

    # --- Metadata ---

    @property
    def kind(self) -> str:
        return self._design.kind

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

    # --- Display ---

    def summary(self) -> str:
        """
        R-style print.boot output.

        Produces:
            ORDINARY NONPARAMETRIC BOOTSTRAP

            Trial Statistics :
                          reference         mean         bias   std. error
             intercept     -2.00000     -2.01234     -0.01234      0.56789
                 slope      1.25000      1.25456      0.00456      0.09567
        """
        title = {
            "monte_carlo": "MONTE CARLO SIMULATION",
            "bootstrap": "ORDINARY NONPARAMETRIC BOOTSTRAP",
        }.get(self.kind, "TRIAL RUN")

        lines = [f"\n{title}\n"]
        lines.append(f"Trials: {self.R} completed of {self.trials_requested}")
        if self.n_skipped:
            lines.append(f"Skipped (degenerate): {self.n_skipped}")
        lines.append("")
        lines.append("Trial Statistics :")
        lines.append(
            f"{'':>10s} {'reference':>12s} {'mean':>12s} "
            f"{'bias':>12s} {'std. error':>12s}"
        )

        for j, name in enumerate(COEFFICIENT_NAMES):
            ref = "NA" if self.reference is None else f"{self.reference[j]:.5f}"
            bias = "NA" if self.bias is None else f"{self.bias[j]:.5f}"
            lines.append(
                f"{name:>10s} {ref:>12s} {self.mean[j]:12.5f} "
                f"{bias:>12s} {self.se[j]:12.5f}"
            )

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TrialCollection(kind={self.kind!r}, R={self.R}, "
            f"n_skipped={self.n_skipped}, backend={self.backend_name!r})"
        )

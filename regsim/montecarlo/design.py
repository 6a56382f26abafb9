"""
Design class for trial runs.

TrialDesign encapsulates all inputs needed by backends to run repeated
generate-and-fit trials. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regsim.core.exceptions import InvalidParameterError
from regsim.core.validation import check_positive_int, check_rng


@dataclass(frozen=True)
class TrialDesign:
    """
    Frozen design for a trial run.

    Attributes:
        trials: Number of trials to attempt.
        generate: fn(rng) -> Sample, called once per trial in order.
        rng: Generator whose stream all trials share.
        reference: (intercept, slope) the estimates are compared against.
        kind: Label for reporting: "monte_carlo", "bootstrap" or "custom".
        on_degenerate: "raise" to fail on the first degenerate trial,
            "skip" to drop it and count it.
        fit_backend: Regression backend used for every trial.
    """
    trials: int
    generate: Callable
    rng: np.random.Generator
    reference: NDArray[np.floating[Any]] | None
    kind: str
    on_degenerate: str
    fit_backend: str

    @classmethod
    def for_trials(
        cls,
        trials: int,
        generate: Callable,
        rng,
        *,
        reference: ArrayLike | None = None,
        kind: str = "custom",
        on_degenerate: str = "raise",
        fit_backend: str = "auto",
    ) -> TrialDesign:
        """
        Create a trial design with validation.

        Raises:
            InvalidParameterError: If inputs are invalid.
        """
        trials = check_positive_int(trials, 'trials')

        if not callable(generate):
            raise InvalidParameterError(
                f"generate: expected a callable fn(rng) -> Sample, "
                f"got {type(generate).__name__}",
                name='generate', value=generate,
            )

        rng = check_rng(rng)

        if on_degenerate not in ("raise", "skip"):
            raise InvalidParameterError(
                f"on_degenerate must be 'raise' or 'skip', got {on_degenerate!r}",
                name='on_degenerate', value=on_degenerate,
            )

        if kind not in ("monte_carlo", "bootstrap", "custom"):
            raise InvalidParameterError(
                f"kind must be 'monte_carlo', 'bootstrap' or 'custom', got {kind!r}",
                name='kind', value=kind,
            )

        if fit_backend not in ("auto", "cpu", "cpu_qr", "cpu_normal"):
            raise InvalidParameterError(
                f"fit_backend: unknown regression backend {fit_backend!r}",
                name='fit_backend', value=fit_backend,
            )

        reference_arr = None
        if reference is not None:
            reference_arr = np.asarray(reference, dtype=np.float64)
            if reference_arr.shape != (2,):
                raise InvalidParameterError(
                    f"reference must be an (intercept, slope) pair, "
                    f"got shape {reference_arr.shape}",
                    name='reference', value=reference,
                )

        return cls(
            trials=trials,
            generate=generate,
            rng=rng,
            reference=reference_arr,
            kind=kind,
            on_degenerate=on_degenerate,
            fit_backend=fit_backend,
        )

"""
CPU backend for repeated generate-and-fit trials.

CPUTrialBackend: the single trial loop shared by Monte Carlo and
bootstrap runs. Each trial consumes the next slice of one Generator.
"""

from __future__ import annotations

import warnings

import numpy as np

from regsim.core.exceptions import DegenerateSampleError
from regsim.core.result import Result
from regsim.core.compute.timing import Timer
from regsim.montecarlo._common import TrialParams
from regsim.montecarlo.design import TrialDesign
from regsim.regression.solvers import fit


class CPUTrialBackend:
    """
    CPU backend for trial runs.

    Trials run sequentially in index order so a seeded Generator
    reproduces the estimates bit for bit.
    """

    @property
    def name(self) -> str:
        return 'cpu_trials'

    def solve(self, design: TrialDesign) -> Result[TrialParams]:
        """
        Run the trials and return Result[TrialParams].

        Raises:
            DegenerateSampleError: A trial could not be fitted and
                on_degenerate is 'raise', or every trial was skipped.
                The trial index is attached as `trial`.
        """
        timer = Timer()
        timer.start()

        trials = design.trials
        rng = design.rng
        t = np.empty((trials, 2), dtype=np.float64)
        completed = 0
        skipped: list[int] = []
        warnings_list: list[str] = []

        with timer.section('trials'):
            for b in range(trials):
                sample = design.generate(rng)
                try:
                    model = fit(sample, backend=design.fit_backend)
                except DegenerateSampleError as e:
                    if design.on_degenerate == "raise":
                        raise DegenerateSampleError(
                            f"Trial {b} of {trials} produced a degenerate sample: {e}",
                            n=e.n,
                            reason=e.reason,
                            trial=b,
                        ) from e
                    skipped.append(b)
                    continue
                t[completed] = model.coefficients
                completed += 1

        if skipped:
            if completed == 0:
                raise DegenerateSampleError(
                    f"All {trials} trials produced degenerate samples",
                    reason='all_trials_degenerate',
                    trial=skipped[-1],
                )
            msg = (f"Skipped {len(skipped)} of {trials} degenerate trials "
                   f"(first at trial {skipped[0]})")
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=2)

        estimates = t[:completed]
        estimates.setflags(write=False)

        with timer.section('summary_statistics'):
            mean = np.mean(estimates, axis=0)
            if completed > 1:
                se = np.std(estimates, axis=0, ddof=1)
            else:
                se = np.full(2, np.nan, dtype=np.float64)
            bias = None if design.reference is None else mean - design.reference

        timer.stop()

        params = TrialParams(
            estimates=estimates,
            R=completed,
            trials_requested=trials,
            n_skipped=len(skipped),
            mean=mean,
            se=se,
            reference=design.reference,
            bias=bias,
        )

        return Result(
            params=params,
            info={
                'kind': design.kind,
                'on_degenerate': design.on_degenerate,
                'skipped_trials': tuple(skipped),
                'fit_backend': design.fit_backend,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

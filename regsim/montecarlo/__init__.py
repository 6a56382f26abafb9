"""
regsim Monte Carlo methods.

Provides Monte Carlo resimulation (fixed predictors, fresh noise) and the
nonparametric case-resampling bootstrap for the OLS coefficients, both
built on one generic trial runner.

Usage:
    from regsim.montecarlo import run_monte_carlo, run_bootstrap

    mc = run_monte_carlo(5000, sample.x, params, rng=np.random.default_rng(7))
    bs = run_bootstrap(1000, sample, rng=np.random.default_rng(42))
    print(compare_standard_errors(fit(sample), mc))
"""

from regsim.montecarlo.design import TrialDesign
from regsim.montecarlo.solution import TrialCollection
from regsim.montecarlo.compare import StandardErrorComparison, compare_standard_errors
from regsim.montecarlo.solvers import run_trials, run_monte_carlo, run_bootstrap

__all__ = [
    "TrialDesign",
    "TrialCollection",
    "StandardErrorComparison",
    "compare_standard_errors",
    "run_trials",
    "run_monte_carlo",
    "run_bootstrap",
]

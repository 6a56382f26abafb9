"""
regsim: the normal linear regression model, by simulation.

Simulate data under known parameters, fit ordinary least squares, and
compare the normal-theory standard errors with Monte Carlo and bootstrap
estimates; check residuals against the model assumptions.

Submodules:
    simulation: Synthetic samples from y = b0 + b1·x + N(0, σ²)
    regression: OLS fit, standard errors, confidence/prediction intervals
    montecarlo: Monte Carlo and bootstrap sampling distributions
    diagnostics: Residual diagnostics
"""

__version__ = "0.1.0"

from regsim import simulation
from regsim import regression
from regsim import montecarlo
from regsim import diagnostics

from regsim.core.datasource import DataSource
from regsim.simulation import ModelParameters, simulate
from regsim.regression import (
    Sample,
    fit,
    confidence_interval,
    prediction_interval,
    mean_response_interval,
)
from regsim.montecarlo import run_monte_carlo, run_bootstrap, compare_standard_errors
from regsim.diagnostics import diagnose

__all__ = [
    "__version__",
    "simulation",
    "regression",
    "montecarlo",
    "diagnostics",
    "DataSource",
    "ModelParameters",
    "simulate",
    "Sample",
    "fit",
    "confidence_interval",
    "prediction_interval",
    "mean_response_interval",
    "run_monte_carlo",
    "run_bootstrap",
    "compare_standard_errors",
    "diagnose",
]

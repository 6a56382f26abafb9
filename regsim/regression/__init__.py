"""
Simple linear regression.

Ordinary least squares with one predictor and an intercept, normal-theory
standard errors, and t-based interval estimates.

Public API:
    fit(sample) / fit(x, y) -> FittedModel
    confidence_interval(model, 'intercept' | 'slope', level) -> ConfidenceInterval
    prediction_interval(model, new_x, level) -> PredictionInterval
    mean_response_interval(model, new_x, level) -> PredictionInterval

Example:
    >>> from regsim.regression import Sample, fit, prediction_interval
    >>> model = fit(Sample.from_arrays(x, y))
    >>> print(model.summary())
    >>> print(prediction_interval(model, 5.0))
"""

from regsim.regression.design import Sample
from regsim.regression.solution import FittedModel, LinearParams
from regsim.regression.intervals import (
    ConfidenceInterval,
    PredictionInterval,
    confidence_interval,
    prediction_interval,
    mean_response_interval,
)
from regsim.regression.solvers import fit

__all__ = [
    "fit",
    "Sample",
    "FittedModel",
    "LinearParams",
    "ConfidenceInterval",
    "PredictionInterval",
    "confidence_interval",
    "prediction_interval",
    "mean_response_interval",
]

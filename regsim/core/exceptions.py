"""
Exception hierarchy for regsim.

All exceptions inherit from RegSimError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class RegSimError(Exception):
    """Base exception for all regsim errors."""
    pass


class ValidationError(RegSimError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InvalidParameterError(ValidationError):
    """
    A simulation, trial-count or interval parameter is out of range.

    Raised before any computation starts (bad n, empty x range,
    negative noise standard deviation, trials < 1, level outside (0, 1)).

    Attributes:
        name: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class NumericalError(RegSimError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateSampleError(NumericalError):
    """
    Sample cannot support a least-squares line fit.

    Raised when there are fewer than three observations (no residual
    degree of freedom) or when every predictor value is identical
    (zero variance, slope undefined).

    Attributes:
        n: Number of observations in the offending sample
        reason: 'too_few_observations' or 'constant_predictor'
        trial: Index of the Monte Carlo/bootstrap trial that produced
            the sample, or None outside a trial loop
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        reason: str | None = None,
        trial: int | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.reason = reason
        self.trial = trial

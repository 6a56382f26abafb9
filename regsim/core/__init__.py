"""
Core infrastructure for regsim.

This module provides shared abstractions and utilities used by all
domain-specific submodules (simulation, regression, montecarlo, diagnostics).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Tabular data loading
    defaults: Shared default values
    compute: Timing and linear algebra kernels
"""

from regsim.core.datasource import DataSource
from regsim.core.result import Result
from regsim.core.exceptions import (
    RegSimError,
    ValidationError,
    DimensionError,
    InvalidParameterError,
    NumericalError,
    DegenerateSampleError,
)

__all__ = [
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "RegSimError",
    "ValidationError",
    "DimensionError",
    "InvalidParameterError",
    "NumericalError",
    "DegenerateSampleError",
]

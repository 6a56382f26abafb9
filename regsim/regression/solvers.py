"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from regsim.core.defaults import MIN_FIT_OBSERVATIONS
from regsim.core.exceptions import DegenerateSampleError
from regsim.regression.design import Sample
from regsim.regression.solution import FittedModel
from regsim.regression.backends.cpu import CPUQRBackend, CPUNormalEquationsBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_qr', 'cpu_normal']


def fit(
    sample_or_x: Sample | ArrayLike,
    y: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> FittedModel:
    """
    Fit a simple linear regression y = b0 + b1·x + e.

    Solves the ordinary least squares problem:
        min_{b0, b1} Σ (y_i - b0 - b1·x_i)²

    This is the primary public API for regression. All input validation,
    backend selection, and result wrapping happens here.

    Args:
        sample_or_x: A Sample, or the predictor values (with y given)
        y: Response values. Required with raw arrays, must be None with
            a Sample.
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_qr': QR decomposition (reference)
            - 'cpu_normal': closed-form normal equations

    Returns:
        FittedModel with estimates, standard errors, residuals and summary

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If x and y have inconsistent lengths
        DegenerateSampleError: If n < 3 or every predictor value is identical

    Example:
        >>> import numpy as np
        >>> from regsim.regression import fit
        >>>
        >>> x = np.linspace(0, 10, 50)
        >>> y = -2 + 1.25 * x + np.random.default_rng(0).normal(0, 3, 50)
        >>> model = fit(x, y)
        >>> print(model.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(sample_or_x, Sample):
        if y is not None:
            raise ValueError("y must be None when fitting a Sample")
        sample = sample_or_x
    else:
        if y is None:
            raise ValueError("y required when sample_or_x is an array")
        sample = Sample.from_arrays(sample_or_x, y)

    check_fittable(sample)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(sample)

    # === Wrap and Return ===
    return FittedModel(_result=result, _sample=sample)


def check_fittable(sample: Sample) -> None:
    """
    Verify a Sample can support a line fit with a residual degree of freedom.

    Raises:
        DegenerateSampleError: If n < 3 or the predictor is constant
    """
    if sample.n < MIN_FIT_OBSERVATIONS:
        raise DegenerateSampleError(
            f"Need at least {MIN_FIT_OBSERVATIONS} observations to fit a line "
            f"with a residual degree of freedom, got {sample.n}",
            n=sample.n,
            reason='too_few_observations',
        )
    if np.all(sample.x == sample.x[0]):
        raise DegenerateSampleError(
            f"All {sample.n} predictor values equal {sample.x[0]:g}; "
            f"slope is undefined",
            n=sample.n,
            reason='constant_predictor',
        )


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_qr'):
        return CPUQRBackend()

    elif choice == 'cpu_normal':
        return CPUNormalEquationsBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")

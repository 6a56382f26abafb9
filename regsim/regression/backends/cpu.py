"""
CPU backends for simple linear regression.

CPUQRBackend: QR decomposition of [1, x] via LAPACK (through NumPy/SciPy).
    This is the reference implementation that replicates R's lm().
CPUNormalEquationsBackend: closed-form normal equations
    b1 = Sxy / Sxx, b0 = ȳ - b1·x̄.

Both produce identical LinearParams up to rounding; only the coefficient
solve differs.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from regsim.core.exceptions import DegenerateSampleError
from regsim.core.result import Result
from regsim.core.compute.timing import Timer
from regsim.core.compute.linalg.qr import qr_factor, qr_solve
from regsim.regression.design import Sample
from regsim.regression.solution import LinearParams


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Implements the backend contract Sample -> Result[LinearParams].
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, sample: Sample) -> Result[LinearParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. Compute QR decomposition: X = QR with X = [1, x]
            2. Solve: β = R⁻¹ Q'y
            3. Compute residuals, fitted values, and standard errors

        Raises:
            DegenerateSampleError: If [1, x] is numerically rank-deficient
        """
        timer = Timer()
        timer.start()

        X = sample.X()

        with timer.section('qr_decomposition'):
            factor = qr_factor(X)

        with timer.section('solve'):
            coefficients = qr_solve(factor, sample.y)

        params = _assemble(sample, coefficients, timer)
        timer.stop()

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': factor.rank,
            'n': sample.n,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUNormalEquationsBackend:
    """
    CPU backend using the closed-form normal equations for one predictor.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal'

    def solve(self, sample: Sample) -> Result[LinearParams]:
        """
        Solve OLS from centered cross-products.

        Raises:
            DegenerateSampleError: If Sxx is zero
        """
        timer = Timer()
        timer.start()

        x, y = sample.x, sample.y

        with timer.section('solve'):
            x_mean = np.mean(x)
            y_mean = np.mean(y)
            dx = x - x_mean
            sxx = float(dx @ dx)
            if sxx <= 0.0:
                raise DegenerateSampleError(
                    f"Predictor has zero variance (Sxx={sxx}); slope is undefined",
                    n=sample.n,
                    reason='constant_predictor',
                )
            slope = float(dx @ (y - y_mean)) / sxx
            intercept = float(y_mean) - slope * float(x_mean)
            coefficients = np.array([intercept, slope], dtype=np.float64)

        params = _assemble(sample, coefficients, timer)
        timer.stop()

        return Result(
            params=params,
            info={'method': 'normal_equations', 'n': sample.n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


def _assemble(
    sample: Sample,
    coefficients: NDArray[np.floating[Any]],
    timer: Timer,
) -> LinearParams:
    """Residuals, fit statistics and normal-theory standard errors."""
    n = sample.n
    x, y = sample.x, sample.y

    with timer.section('residuals'):
        fitted_values = coefficients[0] + coefficients[1] * x
        residuals = y - fitted_values

    with timer.section('statistics'):
        rss = float(residuals @ residuals)
        tss = float(np.sum((y - np.mean(y)) ** 2))
        df_residual = n - 2
        residual_se = float(np.sqrt(rss / df_residual))

        x_mean = float(np.mean(x))
        dx = x - x_mean
        sxx = float(dx @ dx)
        slope_se = residual_se / np.sqrt(sxx)
        intercept_se = residual_se * np.sqrt(1.0 / n + x_mean ** 2 / sxx)
        standard_errors = np.array([intercept_se, slope_se], dtype=np.float64)

    return LinearParams(
        coefficients=coefficients,
        standard_errors=standard_errors,
        residuals=residuals,
        fitted_values=fitted_values,
        rss=rss,
        tss=tss,
        residual_se=residual_se,
        df_residual=df_residual,
        x_mean=x_mean,
        sxx=sxx,
    )

"""
QR least-squares kernel.

Factor the design matrix once with LAPACK (via NumPy), decide its
numerical rank from the diagonal of R, then back-substitute with SciPy.
Splitting factor and solve lets a backend time them separately.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from regsim.core.exceptions import DegenerateSampleError


@dataclass(frozen=True)
class QRFactor:
    """
    Reduced QR factorization X = QR.

    Attributes:
        Q: (n, p) with orthonormal columns
        R: (p, p) upper triangular
        rank: Number of diagonal entries of R above tolerance
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int

    @property
    def full_rank(self) -> bool:
        return self.rank == self.R.shape[1]


def qr_factor(X: NDArray[np.floating[Any]]) -> QRFactor:
    """
    Reduced QR of a tall design matrix.

    Rank uses the LAPACK-style tolerance max(n, p) · eps · |R[0, 0]|.
    """
    Q, R = np.linalg.qr(X, mode='reduced')

    diag = np.abs(np.diag(R))
    if diag.size == 0 or diag[0] == 0.0:
        return QRFactor(Q=Q, R=R, rank=0)
    tol = max(X.shape) * np.finfo(X.dtype).eps * diag[0]
    return QRFactor(Q=Q, R=R, rank=int(np.count_nonzero(diag > tol)))


def qr_solve(
    factor: QRFactor,
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    β = R⁻¹ Q'y.

    Raises:
        DegenerateSampleError: If the factored matrix is rank-deficient
    """
    if not factor.full_rank:
        n, p = factor.Q.shape[0], factor.R.shape[1]
        raise DegenerateSampleError(
            f"Design matrix [1, x] has rank {factor.rank}, expected {p}; "
            f"the predictor is numerically constant",
            n=n,
            reason='rank_deficient',
        )
    return solve_triangular(factor.R, factor.Q.T @ y, lower=False)

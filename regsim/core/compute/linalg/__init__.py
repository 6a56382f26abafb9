"""
Linear algebra kernels.

Submodules:
    qr: QR factorization and least-squares solve
"""

from regsim.core.compute.linalg.qr import QRFactor, qr_factor, qr_solve

__all__ = [
    "QRFactor",
    "qr_factor",
    "qr_solve",
]

"""
Regression backends.

Available backends:
    CPUQRBackend: CPU reference implementation using QR decomposition
    CPUNormalEquationsBackend: CPU closed-form normal equations
"""

from regsim.regression.backends.cpu import CPUQRBackend, CPUNormalEquationsBackend

__all__ = [
    "CPUQRBackend",
    "CPUNormalEquationsBackend",
]

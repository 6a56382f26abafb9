"""
Shared compute infrastructure for regsim.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Least-squares kernels (QR)
"""

from regsim.core.compute.timing import Timer

__all__ = [
    "Timer",
]

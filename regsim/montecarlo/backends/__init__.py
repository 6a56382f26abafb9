"""
Trial-run backends.

Available backends:
    CPUTrialBackend: Sequential generate-and-fit loop
"""

from regsim.montecarlo.backends.cpu import CPUTrialBackend

__all__ = [
    "CPUTrialBackend",
]

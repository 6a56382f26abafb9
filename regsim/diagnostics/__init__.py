"""
Residual diagnostics.

Checks the normal linear model assumptions (normality, independence,
constant variance) from a fitted model's residuals.

Usage:
    from regsim.diagnostics import diagnose

    report = diagnose(model)
    print(report.summary())
"""

from regsim.diagnostics.solution import DiagnosticsSummary
from regsim.diagnostics.solvers import diagnose

__all__ = [
    "DiagnosticsSummary",
    "diagnose",
]

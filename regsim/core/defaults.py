"""
Shared default values for regsim.

This module is the SINGLE SOURCE OF TRUTH for defaults used across
domains. Import from here, never repeat the literals.
"""

# Two-sided confidence level used by every interval function
DEFAULT_CONF_LEVEL = 0.95

# A Sample is a set of points a line could pass through
MIN_SAMPLE_SIZE = 2

# Fitting needs one residual degree of freedom: n - 2 >= 1
MIN_FIT_OBSERVATIONS = 3

__all__ = [
    'DEFAULT_CONF_LEVEL',
    'MIN_SAMPLE_SIZE',
    'MIN_FIT_OBSERVATIONS',
]

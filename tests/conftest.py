"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from regsim.regression import Sample
from regsim.simulation import ModelParameters


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def reference_params():
    """The worked example: y = -2 + 1.25 x + N(0, 3²)."""
    return ModelParameters(intercept=-2.0, slope=1.25, noise_std=3.0)


@pytest.fixture
def simple_sample(rng):
    """Low-noise regression sample for basic tests."""
    n = 100
    x = rng.uniform(0.0, 10.0, n)
    y = 1.0 + 2.0 * x + rng.standard_normal(n) * 0.1
    return Sample.from_arrays(x, y)


@pytest.fixture
def textbook_sample():
    """Small hand-checkable sample: x = 1..5, y = 2, 4, 5, 4, 5."""
    return Sample.from_arrays([1.0, 2.0, 3.0, 4.0, 5.0],
                              [2.0, 4.0, 5.0, 4.0, 5.0])

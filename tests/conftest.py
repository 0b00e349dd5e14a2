"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def normal_sample(rng):
    """200 standard normal draws."""
    return rng.standard_normal(200)


@pytest.fixture
def tied_sample(rng):
    """Integer sample with many ties (values 0..9, n=50)."""
    return rng.integers(0, 10, size=50)

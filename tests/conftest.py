"""Pytest configuration for path tracer tests.

Provides seeded random sources so every test is reproducible, and a small
helper for comparing vectors.
"""

import random

import numpy as np
import pytest


@pytest.fixture
def rng():
    """A seeded Python generator, the kind passed through scatter and camera calls."""
    return random.Random(1234)


@pytest.fixture
def np_rng():
    """A seeded numpy generator for noise tables."""
    return np.random.default_rng(1234)


def assert_vec_close(actual, expected, tol=1e-6):
    """Assert two vectors agree componentwise within tol."""
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual} != {expected}"

"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a22():
    """[[1, 2], [3, 4]]"""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b22():
    """[[5, 6], [7, 8]]"""
    return Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def random_matrix(rng):
    """Random 3x4 matrix with standard normal entries."""
    return Matrix.from_array(rng.standard_normal((3, 4)))

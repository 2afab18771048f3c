"""Pytest configuration file with shared polynomial fixtures."""

import pytest

from polykit.polynomial import Polynomial


@pytest.fixture
def quadratic():
    """Return x**2 + 2x + 1 given with degrees in descending order."""
    return Polynomial([1.0, 2.0, 1.0], [2, 1, 0])


@pytest.fixture
def counting_polynomial():
    """Return 1 + 2x + 3x**2 + ... + 9x**8."""
    return Polynomial([float(c) for c in range(1, 10)], list(range(9)))


@pytest.fixture
def zero_polynomial():
    """Return the polynomial with no terms."""
    return Polynomial([], [])

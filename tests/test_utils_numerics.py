"""Tests for polykit.utils.numerics."""

import warnings

import numpy as np
import pytest

from polykit.utils.numerics import powi

A = 1.1
A2 = A * A
A4 = A2 * A2
A8 = A4 * A4
A16 = A8 * A8


@pytest.mark.parametrize(
    "exponent, expected",
    [
        (7, (A * A2) * A4),
        (17, A * A16),
        (-17, 1.0 / (A * A16)),
        (-20, 1.0 / (A4 * A16)),
    ],
)
def test_powi_uses_repeated_squaring(exponent, expected):
    """Tests that powi rounds exactly like square-and-multiply."""
    assert float(powi(A, exponent)) == expected


def test_powi_matches_known_reciprocal_value():
    """Tests 1.1**-20, whose last digit differs from pow."""
    assert float(powi(1.1, -20)) == 0.1486436280241435


@pytest.mark.parametrize("base", [0.0, -0.0, 3.5, np.nan, np.inf])
def test_powi_zero_exponent_is_one(base):
    """Tests that any base to the power 0 is 1."""
    assert float(powi(base, 0)) == 1.0


def test_powi_negative_base():
    """Tests odd and even powers of a negative base."""
    assert float(powi(-2.0, 3)) == -8.0
    assert float(powi(-2.0, -2)) == 0.25


def test_powi_reciprocal_of_zero_is_silent_inf():
    """Tests that 0**-1 gives inf without a floating-point warning."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert float(powi(0.0, -1)) == np.inf
        assert float(powi(1e200, 3)) == np.inf


def test_powi_elementwise_on_arrays():
    """Tests that array bases are raised element by element."""
    xs = np.array([[A, -1.0], [2.0, 0.5]])
    out = powi(xs, -17)
    assert out.shape == xs.shape
    assert out[0, 0] == 1.0 / (A * A16)
    np.testing.assert_array_equal(out[0, 1:], [-1.0])
    np.testing.assert_array_equal(out[1], [2.0**-17, 2.0**17])

"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = ["powi"]


def powi(base: ArrayLike, exponent: int) -> NDArray[np.float64]:
    """Raises ``base`` to an integer power by repeated squaring.

    The magnitude of ``exponent`` is consumed bit by bit, multiplying the
    running result by the current square whenever the low bit is set. For a
    negative exponent the reciprocal of that product is returned. This gives
    the same rounding as the usual ``powi`` runtime routine, which differs
    in the last bits from ``pow`` for most bases.

    ``powi(x, 0)`` is ``1`` for every ``x``, including ``0`` and NaN.
    Overflow and division by zero produce ``inf`` silently.

    Args:
        base: Scalar or array of bases, converted to ``float64``.
        exponent: Signed integer exponent.

    Returns:
        Array shaped like ``base`` (0-d for scalar input).
    """
    a = np.asarray(base, dtype=np.float64)
    n = abs(int(exponent))
    result = np.ones_like(a)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        while True:
            if n & 1:
                result = result * a
            n >>= 1
            if n == 0:
                break
            a = a * a
        if exponent < 0:
            result = np.divide(1.0, result)
    return result

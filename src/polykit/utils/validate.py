"""Validation utilities for polynomial inputs."""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike

from polykit.utils.types import FloatArray, IntArray

__all__ = [
    "validate_coefficients",
    "validate_degrees",
]

_INT64 = np.iinfo(np.int64)


def _check_int64_range(lowest: int, highest: int) -> None:
    if lowest < _INT64.min or highest > _INT64.max:
        raise ValueError("degrees must fit in int64.")


def validate_coefficients(coefficients: ArrayLike) -> FloatArray:
    """Converts coefficients into a fresh 1D float64 array.

    Args:
        coefficients: Array-like of real coefficients, one per term.

    Returns:
        A new 1D ``float64`` array; never a view of the input.

    Raises:
        ValueError: If ``coefficients`` is not one-dimensional.
    """
    arr = np.array(coefficients, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"coefficients must be 1D; got ndim={arr.ndim}.")
    return arr


def validate_degrees(degrees: ArrayLike) -> IntArray:
    """Converts degrees into a fresh 1D int64 array.

    Integer-valued floats such as ``2.0`` are accepted and cast; anything
    with a fractional part, or a non-numeric dtype, is rejected.

    Args:
        degrees: Array-like of signed integer exponents, one per term.

    Returns:
        A new 1D ``int64`` array; never a view of the input.

    Raises:
        ValueError: If ``degrees`` is not one-dimensional, holds
            non-integral values, or holds values outside the int64 range.
        TypeError: If ``degrees`` is not numeric.
    """
    arr = np.asarray(degrees)
    if arr.ndim != 1:
        raise ValueError(f"degrees must be 1D; got ndim={arr.ndim}.")
    if arr.size == 0:
        return np.empty(0, dtype=np.int64)

    if np.issubdtype(arr.dtype, np.integer):
        _check_int64_range(int(arr.min()), int(arr.max()))
        return arr.astype(np.int64, copy=True)
    if np.issubdtype(arr.dtype, np.floating):
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.round(arr)):
            raise ValueError("degrees must be integers.")
        # 2**63 is exactly representable; int64 max is not.
        if np.any(arr < -(2.0**63)) or np.any(arr >= 2.0**63):
            raise ValueError("degrees must fit in int64.")
        return arr.astype(np.int64)
    if arr.dtype == object:
        # Python ints beyond uint64 land here.
        values = arr.tolist()
        if all(isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in values):
            _check_int64_range(min(values), max(values))
            return np.array(values, dtype=np.int64)
    raise TypeError(f"degrees must be integers; got dtype={arr.dtype}.")

"""Provides the Polynomial value type.

A :class:`Polynomial` stores a univariate polynomial as two index-aligned
arrays: float coefficients and signed integer degrees. Term ``i`` contributes
``coefficients[i] * x**degrees[i]``. Terms are kept in ascending degree order
(stable with respect to the input), and duplicate degrees are stored as
separate terms rather than merged.

Instances never change after construction. Differentiation returns a new
instance, evaluation returns a float.

Typical usage examples:

>>> from polykit.polynomial import Polynomial
>>> p = Polynomial([1.0, 2.0, 1.0], [2, 1, 0])
>>> print(p)
(0, 1), (1, 2), (2, 1)
>>> p.compute(-1.0)
0.0
>>> print(p.differentiate())
(0, 2), (1, 2)
>>> print(p.differentiate(order=3))
<BLANKLINE>
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from polykit.logger import polykit_logger
from polykit.utils.formatting import format_float
from polykit.utils.numerics import powi
from polykit.utils.types import Coefficients, Degrees, FloatArray, IntArray, Term
from polykit.utils.validate import validate_coefficients, validate_degrees

__all__ = ["MismatchError", "Polynomial"]


class MismatchError(ValueError):
    """Coefficient and degree sequences passed to construction differ in length."""

    def __init__(self) -> None:
        super().__init__("Coefficient and degree vectors are not of equal length")


class Polynomial:
    """Immutable univariate polynomial with explicitly listed terms.

    Attributes:
        coefficients: Read-only ``float64`` array, one entry per term.
        degrees: Read-only ``int64`` array aligned with ``coefficients``,
            sorted ascending.
    """

    __slots__ = ("_coefficients", "_degrees")

    def __init__(self, coefficients: Coefficients, degrees: Degrees) -> None:
        """Builds a polynomial from parallel coefficient and degree sequences.

        Each coefficient is paired with the degree at the same position, the
        pairs are stable-sorted by ascending degree, and the result is split
        back into two aligned arrays. Equal-length empty inputs give the zero
        polynomial.

        Args:
            coefficients: Term coefficients.
            degrees: Term exponents, same length as ``coefficients``. Need not
                be unique, contiguous or non-negative.

        Raises:
            MismatchError: If the two sequences differ in length.
        """
        if np.shape(coefficients)[:1] != np.shape(degrees)[:1]:
            raise MismatchError()
        c = validate_coefficients(coefficients)
        d = validate_degrees(degrees)

        order = np.argsort(d, kind="stable")
        sorted_degrees = d[order]
        self._store(c[order], sorted_degrees)

        polykit_logger.debug(
            "Built polynomial with %d term(s)%s.",
            sorted_degrees.size,
            " including duplicate degrees" if np.any(np.diff(sorted_degrees) == 0) else "",
        )

    @classmethod
    def _from_sorted(cls, coefficients: FloatArray, degrees: IntArray) -> Polynomial:
        """Wraps arrays that already satisfy the ordering invariant."""
        obj = cls.__new__(cls)
        obj._store(coefficients, degrees)
        return obj

    def _store(self, coefficients: FloatArray, degrees: IntArray) -> None:
        coefficients = np.array(coefficients, dtype=np.float64, copy=True)
        degrees = np.array(degrees, dtype=np.int64, copy=True)
        coefficients.setflags(write=False)
        degrees.setflags(write=False)
        object.__setattr__(self, "_coefficients", coefficients)
        object.__setattr__(self, "_degrees", degrees)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable.")

    def __reduce__(self):
        return (type(self)._from_sorted, (self._coefficients, self._degrees))

    @property
    def coefficients(self) -> FloatArray:
        """Read-only coefficient array in stored order."""
        return self._coefficients

    @property
    def degrees(self) -> IntArray:
        """Read-only degree array, ascending."""
        return self._degrees

    @property
    def terms(self) -> tuple[Term, ...]:
        """``(degree, coefficient)`` pairs in stored order."""
        return tuple(zip(self._degrees.tolist(), self._coefficients.tolist()))

    @property
    def is_zero(self) -> bool:
        """True when the polynomial has no terms."""
        return self._degrees.size == 0

    def __len__(self) -> int:
        return int(self._degrees.size)

    def differentiate(self, order: int = 1) -> Polynomial:
        """Returns the derivative as a new polynomial.

        Degree-0 terms vanish; every other term ``(d, c)`` becomes
        ``(d - 1, c * d)``. The surviving terms keep their relative order,
        so no re-sorting happens.

        Args:
            order: How many times to differentiate. ``0`` returns an equal
                copy.

        Returns:
            The differentiated polynomial.

        Raises:
            ValueError: If ``order`` is negative.
        """
        if order < 0:
            raise ValueError(f"order must be non-negative; got {order}.")

        coefficients, degrees = self._coefficients, self._degrees
        for _ in range(order):
            keep = degrees != 0
            degrees = degrees[keep]
            coefficients = coefficients[keep] * degrees.astype(np.float64)
            degrees = degrees - 1
        return Polynomial._from_sorted(coefficients, degrees)

    def compute(self, x: float) -> float:
        """Evaluates the polynomial at ``x``.

        Each term is ``c * x**d`` with integer-exponent semantics, so
        ``x**0 == 1`` even at ``x == 0``. Terms are accumulated one by one in
        ascending degree order starting from ``0.0``. A negative degree at
        ``x == 0`` produces ``inf`` (or ``nan``) without raising.

        Args:
            x: Evaluation point.

        Returns:
            The polynomial value; ``0.0`` for the zero polynomial.
        """
        x = float(x)
        total = 0.0
        for d, c in zip(self._degrees.tolist(), self._coefficients.tolist()):
            total += c * float(powi(x, d))

        if not np.isfinite(total):
            polykit_logger.debug("Polynomial evaluated to %r at x=%r.", total, x)
        return total

    def __call__(self, x: ArrayLike) -> float | NDArray[np.float64]:
        """Evaluates at a scalar or element-wise over an array of points.

        Args:
            x: Scalar or array-like of evaluation points.

        Returns:
            A float for scalar input, otherwise an array shaped like ``x``.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        if x_arr.ndim == 0:
            return self.compute(float(x_arr))

        total = np.zeros_like(x_arr)
        with np.errstate(over="ignore", invalid="ignore"):
            for d, c in zip(self._degrees.tolist(), self._coefficients.tolist()):
                total = total + c * powi(x_arr, d)
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return bool(
            np.array_equal(self._degrees, other._degrees)
            and np.array_equal(self._coefficients, other._coefficients)
        )

    def __hash__(self) -> int:
        return hash((tuple(self._degrees.tolist()), tuple(self._coefficients.tolist())))

    def __str__(self) -> str:
        return ", ".join(f"({d}, {format_float(c)})" for d, c in self.terms)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(coefficients={self._coefficients.tolist()!r}, "
            f"degrees={self._degrees.tolist()!r})"
        )

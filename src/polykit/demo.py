"""Walk-through of construction, differentiation and evaluation.

Run with:
    python -m polykit.demo

or, once installed:
    polykit-demo
"""

from __future__ import annotations

from polykit.polynomial import MismatchError, Polynomial
from polykit.utils.formatting import format_float


def main() -> None:
    """Prints two sample polynomials, their derivatives and some values."""
    try:
        p = Polynomial([float(c) for c in range(1, 10)], list(range(9)))
    except MismatchError:
        return

    print(p)
    print(p.differentiate())

    try:
        p = Polynomial([1.0, 2.0, 1.0], [2, 1, 0])
    except MismatchError:
        return
    print(format_float(p.compute(-1.0)))

    diff_p = p.differentiate()
    print(format_float(diff_p.compute(-2.0)))

    double_diff_p = diff_p.differentiate()
    print(format_float(double_diff_p.compute(-2.0)))

    triple_diff_p = double_diff_p.differentiate()
    print(format_float(triple_diff_p.compute(-1.0)))


if __name__ == "__main__":
    main()

"""Text conversion for floats shown in polynomial listings.

Numbers are written in positional notation with the shortest digit string
that round-trips, and integral values drop the trailing ``.0``::

    >>> from polykit.utils.formatting import format_float
    >>> format_float(12.0)
    '12'
    >>> format_float(0.1)
    '0.1'
    >>> format_float(1e20)
    '100000000000000000000'
"""

from __future__ import annotations

import numpy as np

__all__ = ["format_float"]


def format_float(value: float) -> str:
    """Returns the display text for a single float.

    Args:
        value: The number to format.

    Returns:
        Positional text without exponent; ``"NaN"`` for not-a-number and
        ``"inf"``/``"-inf"`` for infinities.
    """
    value = float(value)
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, unique=True, trim="-")

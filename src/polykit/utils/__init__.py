"""Utility functions for the polykit package."""

from .formatting import format_float
from .numerics import powi
from .validate import validate_coefficients, validate_degrees

__all__ = [
    "format_float",
    "powi",
    "validate_coefficients",
    "validate_degrees",
]

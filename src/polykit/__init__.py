"""Provides the polykit polynomial type."""

from importlib.metadata import PackageNotFoundError, version

from polykit.polynomial import MismatchError, Polynomial

try:
    __version__ = version("polykit")
except PackageNotFoundError:
    pass

__all__ = [
    "MismatchError",
    "Polynomial",
]

"""Shared typing aliases for polykit."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]
IntArray: TypeAlias = NDArray[np.int64]

Coefficients: TypeAlias = Sequence[float] | NDArray[np.floating]
Degrees: TypeAlias = Sequence[int] | NDArray[np.integer]
Term: TypeAlias = tuple[int, float]

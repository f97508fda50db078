"""
Core Type Definitions
=====================

Fundamental types and data structures shared by the families registry and
the truncation kernel.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from math import inf, isnan
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray

from ecs_uncertainty.exceptions import InvalidIntervalError

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ArrayLike = Number | NumericArray | list[float] | tuple[float, ...]
"""Anything accepted as a batch of query points or probabilities."""

type ParametrizationName = str
"""Type alias for parametrization names."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Standard names of the characteristics a family may provide.

    ``PDF``, ``CDF`` and ``PPF`` are required by the truncation kernel,
    ``RVS`` is optional and ``MEAN``/``VAR`` are used for cross-checks.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    RVS = "rvs"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    """Names of the built-in families (short names)."""

    NORMAL = "norm"
    LOGNORMAL = "lnorm"
    GAMMA = "gamma"
    EXPONENTIAL = "exp"
    UNIFORM = "unif"


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Closed 1D interval ``[left, right]``; infinite endpoints are open.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.

    Raises
    ------
    InvalidIntervalError
        If an endpoint is NaN or ``left > right``.
    """

    left: float = -inf
    right: float = inf

    def __post_init__(self) -> None:
        left, right = float(self.left), float(self.right)
        if isnan(left) or isnan(right):
            raise InvalidIntervalError(f"Interval bounds must not be NaN, got [{left}, {right}]")
        if left > right:
            raise InvalidIntervalError(f"Lower bound {left} is greater than upper bound {right}")
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie in the interval.

        NaN is never contained.
        """
        arr = np.asarray(x, dtype=float)
        result = (arr >= self.left) & (arr <= self.right)

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def clip(self, x: Number | NumericArray) -> NumericArray:
        """Clamp point(s) into the interval; NaN stays NaN."""
        return cast(NumericArray, np.clip(np.asarray(x, dtype=float), self.left, self.right))

    def intersect(self, other: "Interval1D") -> "Interval1D":
        """
        Intersection with another interval.

        Raises
        ------
        InvalidIntervalError
            If the intervals do not overlap.
        """
        return Interval1D(max(self.left, other.left), min(self.right, other.right))

    @property
    def is_finite(self) -> bool:
        """Both endpoints are finite."""
        return bool(np.isfinite(self.left) and np.isfinite(self.right))

    @property
    def is_real_line(self) -> bool:
        """Interval is the whole real line (no truncation)."""
        return self.left == -inf and self.right == inf


TruncationInterval = Interval1D
"""The support restriction ``{x : a <= x <= b}`` applied by the kernel."""


__all__ = [
    "ArrayLike",
    "BoolArray",
    "CharacteristicName",
    "FamilyName",
    "GenericCharacteristicName",
    "Interval1D",
    "Number",
    "NumericArray",
    "NumPyNumber",
    "ParametrizationName",
    "ScalarFunc",
    "TruncationInterval",
]

"""
Truncated distribution bound to a family, its parameters and an interval.

:class:`TruncatedDistribution` is a convenience binding of the kernel
arguments ``(spec, a, b, θ)``; each method calls the corresponding kernel
operation and recomputes everything from scratch.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ecs_uncertainty.truncation import kernel
from ecs_uncertainty.types import Interval1D

if TYPE_CHECKING:
    from typing import Any

    from ecs_uncertainty.config import Settings
    from ecs_uncertainty.families.parametric_family import ParametricFamily
    from ecs_uncertainty.sampling import RandomSource
    from ecs_uncertainty.types import ArrayLike, NumericArray


@dataclass(frozen=True, slots=True)
class TruncatedDistribution:
    """
    A base family restricted to ``[a, b]`` and renormalized.

    Parameters
    ----------
    spec : str or ParametricFamily
        Base family.
    a, b : float
        Truncation bounds.
    theta : dict
        Family parameters forwarded to every kernel call.

    Raises
    ------
    InvalidIntervalError
        On construction, if ``a > b`` or a bound is NaN.
    """

    spec: str | ParametricFamily
    a: float = -math.inf
    b: float = math.inf
    theta: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        interval = Interval1D(self.a, self.b)
        object.__setattr__(self, "a", interval.left)
        object.__setattr__(self, "b", interval.right)
        object.__setattr__(self, "theta", dict(self.theta))

    def __hash__(self) -> int:
        return hash((self.spec, self.a, self.b, tuple(sorted(self.theta.items()))))

    @classmethod
    def of(
        cls,
        spec: str | ParametricFamily,
        a: float = -math.inf,
        b: float = math.inf,
        **theta: Any,
    ) -> TruncatedDistribution:
        """Build from keyword family parameters, mirroring the kernel signature."""
        return cls(spec, a, b, theta)

    @property
    def interval(self) -> Interval1D:
        """Truncation interval."""
        return Interval1D(self.a, self.b)

    @property
    def family(self) -> ParametricFamily:
        """Resolved base family."""
        return kernel.resolve_family(self.spec)

    @property
    def support(self) -> Interval1D:
        """Truncation interval intersected with the base family's support."""
        base = self.family.distribution(**self.theta).support
        return self.interval if base is None else self.interval.intersect(base)

    @property
    def mass(self) -> float:
        """Base probability of ``[a, b]``."""
        return kernel.interval_mass(self.spec, self.a, self.b, **self.theta)

    def pdf(self, x: ArrayLike) -> NumericArray:
        return kernel.density_trunc(x, self.spec, self.a, self.b, **self.theta)

    def cdf(self, x: ArrayLike) -> NumericArray:
        return kernel.cdf_trunc(x, self.spec, self.a, self.b, **self.theta)

    def ppf(self, p: ArrayLike) -> NumericArray:
        return kernel.quantile_trunc(p, self.spec, self.a, self.b, **self.theta)

    def median(self) -> float:
        return float(self.ppf(0.5))

    def mean(self, settings: Settings | None = None) -> float:
        return kernel.mean_trunc(self.spec, self.a, self.b, settings=settings, **self.theta)

    def var(self, settings: Settings | None = None) -> float:
        return kernel.variance_trunc(self.spec, self.a, self.b, settings=settings, **self.theta)

    def std(self, settings: Settings | None = None) -> float:
        return math.sqrt(self.var(settings))

    def sample(self, n: int, rng: RandomSource = None) -> NumericArray:
        return kernel.sample_trunc(n, self.spec, self.a, self.b, rng=rng, **self.theta)

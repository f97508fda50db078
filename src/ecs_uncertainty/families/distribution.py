"""
Concrete distribution instances with specific parameter values.

This module provides the distribution instances created from parametric
families and the :class:`DistributionPrimitives` bundle (density, CDF,
quantile function and sampler) that the truncation kernel works with.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ecs_uncertainty.exceptions import UnknownDistributionFamilyError
from ecs_uncertainty.sampling import (
    InverseTransformSamplingStrategy,
    check_sample_size,
    resolve_rng,
)
from ecs_uncertainty.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from ecs_uncertainty.families.parametric_family import ParametricFamily
    from ecs_uncertainty.families.parametrizations import Parametrization
    from ecs_uncertainty.sampling import RandomSource
    from ecs_uncertainty.types import (
        ArrayLike,
        GenericCharacteristicName,
        Interval1D,
        NumericArray,
    )


@dataclass(frozen=True, slots=True)
class DistributionPrimitives:
    """
    The four operations of a base distribution, bound to its parameters.

    Parameters
    ----------
    density : Callable[[NumericArray], NumericArray]
        Probability density function.
    cdf : Callable[[NumericArray], NumericArray]
        Cumulative distribution function.
    quantile : Callable[[NumericArray], NumericArray]
        Inverse CDF, defined on ``[0, 1]``.
    sample : Callable[[int, RandomSource], NumericArray] or None
        Native random variate generator, when the family has one.
    """

    density: Callable[[NumericArray], NumericArray]
    cdf: Callable[[NumericArray], NumericArray]
    quantile: Callable[[NumericArray], NumericArray]
    sample: Callable[[int, RandomSource], NumericArray] | None = None


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parameters : Parametrization
        Validated parameter values.
    """

    family: ParametricFamily
    parameters: Parametrization

    @property
    def family_name(self) -> str:
        """Name of the family."""
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the parameters were given in."""
        return self.parameters.name

    @property
    def support(self) -> Interval1D | None:
        """Support of this distribution, if the family declares one."""
        return self.family.support_of(self.parameters)

    @property
    def characteristics(self) -> dict[GenericCharacteristicName, Callable[..., Any]]:
        """Characteristic functions bound to the parameters (rebuilt on each access)."""
        return self.family.build_characteristics(self.parameters)

    def query_method(self, name: GenericCharacteristicName) -> Callable[..., Any]:
        """
        Resolve a bound characteristic function.

        Raises
        ------
        UnknownDistributionFamilyError
            If the family does not provide ``name``.
        """
        try:
            return self.characteristics[name]
        except KeyError as exc:
            raise UnknownDistributionFamilyError(
                f"Family '{self.family_name}' does not provide characteristic '{name}'"
            ) from exc

    def pdf(self, x: ArrayLike) -> NumericArray:
        """Density at ``x``."""
        return self.query_method(CharacteristicName.PDF)(np.asarray(x, dtype=float))

    def cdf(self, x: ArrayLike) -> NumericArray:
        """Distribution function at ``x``."""
        return self.query_method(CharacteristicName.CDF)(np.asarray(x, dtype=float))

    def ppf(self, p: ArrayLike) -> NumericArray:
        """Quantile function at ``p``."""
        return self.query_method(CharacteristicName.PPF)(np.asarray(p, dtype=float))

    def mean(self) -> float:
        """Analytical mean."""
        return float(self.query_method(CharacteristicName.MEAN)(None))

    def var(self) -> float:
        """Analytical variance."""
        return float(self.query_method(CharacteristicName.VAR)(None))

    def sample(self, n: int, rng: RandomSource = None) -> NumericArray:
        """
        Draw ``n`` variates.

        The family's own generator is used when available, otherwise the
        quantile function is applied to uniforms.
        """
        rvs = self.characteristics.get(CharacteristicName.RVS)
        if rvs is None:
            return InverseTransformSamplingStrategy().sample(n, self.ppf, rng)
        return np.asarray(rvs(check_sample_size(n), resolve_rng(rng)), dtype=np.float64)

    @property
    def primitives(self) -> DistributionPrimitives:
        """
        Bundle of density, CDF, quantile and sampler for this distribution.

        Raises
        ------
        UnknownDistributionFamilyError
            If the family lacks a density, CDF or quantile function.
        """
        chars = self.characteristics
        missing = [
            name
            for name in (CharacteristicName.PDF, CharacteristicName.CDF, CharacteristicName.PPF)
            if name not in chars
        ]
        if missing:
            raise UnknownDistributionFamilyError(
                f"Family '{self.family_name}' does not provide required primitives: "
                f"{', '.join(missing)}"
            )
        return DistributionPrimitives(
            density=chars[CharacteristicName.PDF],
            cdf=chars[CharacteristicName.CDF],
            quantile=chars[CharacteristicName.PPF],
            sample=self.sample,
        )

"""
Uniform distribution family implementation.

Contains the continuous Uniform family (``"unif"``).
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from ecs_uncertainty.families.parametric_family import ParametricFamily
from ecs_uncertainty.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from ecs_uncertainty.families.registry import ParametricFamilyRegister
from ecs_uncertainty.types import CharacteristicName, FamilyName, Interval1D, NumericArray

if TYPE_CHECKING:
    from typing import Any



def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside [lower, upper] are equally probable.

    Probability density function:
        f(x) = 1/(upper - lower) for x in [lower, upper], 0 otherwise
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - For x < lower: returns 0
            - For x > upper: returns 0
        """
        parameters = cast(_Bounds, parameters)
        x = np.asarray(x, dtype=float)
        inside = (x >= parameters.lower) & (x <= parameters.upper)
        dens = np.where(inside, 1.0 / (parameters.upper - parameters.lower), 0.0)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, dens))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for uniform distribution."""
        parameters = cast(_Bounds, parameters)
        width = parameters.upper - parameters.lower
        return cast(
            NumericArray,
            np.clip((np.asarray(x, dtype=float) - parameters.lower) / width, 0.0, 1.0),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=float)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Bounds, parameters)
        return cast(NumericArray, parameters.lower + p * (parameters.upper - parameters.lower))

    def rvs(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        """Draw ``n`` uniform variates."""
        parameters = cast(_Bounds, parameters)
        return rng.uniform(parameters.lower, parameters.upper, size=n)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Bounds, parameters)
        return (parameters.lower + parameters.upper) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Bounds, parameters)
        return (parameters.upper - parameters.lower) ** 2 / 12

    def _support(parameters: Parametrization) -> Interval1D:
        parameters = cast(_Bounds, parameters)
        return Interval1D(parameters.lower, parameters.upper)

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
        distr_parametrizations=["bounds"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.RVS: rvs,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="bounds")
    class _Bounds(Parametrization):
        """
        Bounds parametrization of uniform distribution.

        Parameters
        ----------
        lower : float, default 0.0
            Lower bound
        upper : float, default 1.0
            Upper bound
        """

        lower: float = 0.0
        upper: float = 1.0

        @constraint(description="lower < upper")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower < self.upper

        @constraint(description="bounds are finite")
        def check_bounds_finite(self) -> bool:
            return math.isfinite(self.lower) and math.isfinite(self.upper)

    ParametricFamilyRegister.register(Uniform)

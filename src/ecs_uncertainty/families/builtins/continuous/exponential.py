"""
Exponential distribution family implementation.

Contains the Exponential family (``"exp"``) with rate and scale parameterizations.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

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



def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Single parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for exponential distribution (zero for x < 0)."""
        rate = cast(_Rate, parameters).rate
        x = np.asarray(x, dtype=float)
        with np.errstate(over="ignore"):
            dens = rate * np.exp(-rate * np.maximum(x, 0.0))
        return cast(NumericArray, np.where(np.isnan(x), np.nan, np.where(x >= 0, dens, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for exponential distribution."""
        rate = cast(_Rate, parameters).rate
        x = np.asarray(x, dtype=float)
        values = -np.expm1(-rate * np.maximum(x, 0.0))
        return cast(NumericArray, np.where(np.isnan(x), np.nan, values))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for exponential distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=float)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        rate = cast(_Rate, parameters).rate
        with np.errstate(divide="ignore"):
            return cast(NumericArray, -np.log1p(-p) / rate)

    def rvs(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        """Draw ``n`` exponential variates."""
        return rng.exponential(1.0 / cast(_Rate, parameters).rate, size=n)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of exponential distribution."""
        return 1.0 / cast(_Rate, parameters).rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of exponential distribution."""
        return 1.0 / cast(_Rate, parameters).rate ** 2

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D(0.0)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_parametrizations=["rate", "scale"],
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
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        rate : float, default 1.0
            Rate λ
        """

        rate: float = 1.0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        scale : float, default 1.0
            Scale β = 1/λ
        """

        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(rate=1.0 / self.scale)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Exponential)

"""
Gamma distribution family implementation.

Contains the Gamma family (``"gamma"``) with shape/rate and shape/scale
parameterizations.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln, xlogy

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



def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Defined by a shape k and a rate λ (or scale θ = 1/λ) on [0, ∞).

    Probability density function:
        f(x) = λ^k x^(k-1) exp(-λx) / Γ(k),  x ≥ 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for gamma distribution.

        Zero for x < 0. At x = 0 the density is inf, λ or 0 for shape
        below, equal to or above one.
        """
        parameters = cast(_ShapeRate, parameters)
        k, rate = parameters.shape, parameters.rate
        x = np.asarray(x, dtype=float)
        nonneg = x >= 0
        safe_x = np.where(nonneg, x, 0.0)
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            log_dens = xlogy(k - 1, safe_x) - rate * safe_x + k * math.log(rate) - gammaln(k)
            dens = np.exp(log_dens)
        dens = np.where(np.isposinf(safe_x), 0.0, dens)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, np.where(nonneg, dens, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        x = np.asarray(x, dtype=float)
        values = gammainc(parameters.shape, parameters.rate * np.maximum(x, 0.0))
        return cast(NumericArray, np.where(np.isnan(x), np.nan, values))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for gamma distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=float)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_ShapeRate, parameters)
        return cast(NumericArray, gammaincinv(parameters.shape, p) / parameters.rate)

    def rvs(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        """Draw ``n`` gamma variates."""
        parameters = cast(_ShapeRate, parameters)
        return rng.gamma(parameters.shape, 1.0 / parameters.rate, size=n)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate**2

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D(0.0)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_parametrizations=["shapeRate", "shapeScale"],
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
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape k
        rate : float, default 1.0
            Rate λ
        """

        shape: float
        rate: float = 1.0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape k
        scale : float, default 1.0
            Scale θ = 1/λ
        """

        shape: float
        scale: float = 1.0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(shape=self.shape, rate=1.0 / self.scale)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Gamma)

"""
Normal distribution family implementation.

Contains the Normal family (``"norm"``) with mean/sd and mean/precision
parameterizations.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

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



def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Symmetric about its mean and defined by two parameters: mean (μ) and
    standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float
            - sd: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MeanSd, parameters)
        z = (np.asarray(x, dtype=float) - parameters.mean) / parameters.sd
        return cast(NumericArray, np.exp(-0.5 * z**2) / (parameters.sd * math.sqrt(2 * math.pi)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal distribution.

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_MeanSd, parameters)
        z = (np.asarray(x, dtype=float) - parameters.mean) / parameters.sd
        return cast(NumericArray, ndtr(z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p.
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=float)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MeanSd, parameters)
        return cast(NumericArray, parameters.mean + parameters.sd * ndtri(p))

    def rvs(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        """Draw ``n`` normal variates."""
        parameters = cast(_MeanSd, parameters)
        return rng.normal(parameters.mean, parameters.sd, size=n)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        return cast(_MeanSd, parameters).mean

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        return cast(_MeanSd, parameters).sd ** 2

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D()

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_parametrizations=["meanSd", "meanPrec"],
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
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanSd")
    class _MeanSd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mean : float, default 0.0
            Mean of the distribution
        sd : float, default 1.0
            Standard deviation of the distribution
        """

        mean: float = 0.0
        sd: float = 1.0

        @constraint(description="sd > 0")
        def check_sd_positive(self) -> bool:
            return self.sd > 0

        @constraint(description="mean is finite")
        def check_mean_finite(self) -> bool:
            return math.isfinite(self.mean)

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mean : float, default 0.0
            Mean of the distribution
        tau : float, default 1.0
            Precision parameter (inverse variance)
        """

        mean: float = 0.0
        tau: float = 1.0

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanSd(mean=self.mean, sd=math.sqrt(1 / self.tau))  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Normal)

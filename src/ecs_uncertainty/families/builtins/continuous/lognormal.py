"""
Lognormal distribution family implementation.

Contains the Lognormal family (``"lnorm"``) parametrized either on the log
scale (meanlog/sdlog) or by the arithmetic mean and standard deviation of
the variable itself. ECS distributions built from literature estimates are
usually given in the latter form.
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



def log_moments(mean: float, sd: float) -> tuple[float, float]:
    """
    Log-scale parameters of a lognormal with the given arithmetic mean and sd.

    ``meanlog = log(m² / √(sd² + m²))`` and ``sdlog = √log(1 + sd²/m²)``.
    """
    meanlog = math.log(mean**2 / math.sqrt(sd**2 + mean**2))
    sdlog = math.sqrt(math.log1p(sd**2 / mean**2))
    return meanlog, sdlog


def configure_lognormal_family() -> None:
    """
    Configure and register the Lognormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Lognormal distribution.

    X is lognormal when log(X) is normal with mean μ (meanlog) and standard
    deviation σ (sdlog). The support is [0, ∞).

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(log x - μ)²/(2σ²)),  x > 0
    """

    def _log_z(parameters: _LogMeanSd, x: NumericArray) -> NumericArray:
        """Standardized log of the positive entries; -inf elsewhere."""
        positive = x > 0
        with np.errstate(divide="ignore", invalid="ignore"):
            logs = np.log(np.where(positive, x, 1.0))
        return cast(
            NumericArray,
            np.where(positive, (logs - parameters.meanlog) / parameters.sdlog, -np.inf),
        )

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for lognormal distribution.

        Zero for x <= 0.
        """
        parameters = cast(_LogMeanSd, parameters)
        x = np.asarray(x, dtype=float)
        z = _log_z(parameters, x)
        safe_x = np.where(x > 0, x, 1.0)
        dens = np.exp(-0.5 * z**2) / (safe_x * parameters.sdlog * math.sqrt(2 * math.pi))
        return cast(NumericArray, np.where(np.isnan(x), np.nan, np.where(x > 0, dens, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for lognormal distribution."""
        parameters = cast(_LogMeanSd, parameters)
        x = np.asarray(x, dtype=float)
        values = ndtr(_log_z(parameters, x))
        return cast(NumericArray, np.where(np.isnan(x), np.nan, values))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for lognormal distribution.

        ``ppf(0) = 0`` and ``ppf(1) = inf``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=float)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LogMeanSd, parameters)
        return cast(NumericArray, np.exp(parameters.meanlog + parameters.sdlog * ndtri(p)))

    def rvs(parameters: Parametrization, n: int, rng: np.random.Generator) -> NumericArray:
        """Draw ``n`` lognormal variates."""
        parameters = cast(_LogMeanSd, parameters)
        return rng.lognormal(parameters.meanlog, parameters.sdlog, size=n)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of lognormal distribution."""
        parameters = cast(_LogMeanSd, parameters)
        return math.exp(parameters.meanlog + parameters.sdlog**2 / 2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of lognormal distribution."""
        parameters = cast(_LogMeanSd, parameters)
        s2 = parameters.sdlog**2
        return math.expm1(s2) * math.exp(2 * parameters.meanlog + s2)

    def mean_func_arithmetic(parameters: Parametrization, _: Any) -> float:
        """Mean given directly by the arithmetic parametrization."""
        return cast(_MeanSd, parameters).mean

    def var_func_arithmetic(parameters: Parametrization, _: Any) -> float:
        """Variance given directly by the arithmetic parametrization."""
        return cast(_MeanSd, parameters).sd ** 2

    def _support(_: Parametrization) -> Interval1D:
        return Interval1D(0.0)

    Lognormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        distr_parametrizations=["logMeanSd", "meanSd"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.RVS: rvs,
            CharacteristicName.MEAN: {"logMeanSd": mean_func, "meanSd": mean_func_arithmetic},
            CharacteristicName.VAR: {"logMeanSd": var_func, "meanSd": var_func_arithmetic},
        },
        support_by_parametrization=_support,
    )
    Lognormal.__doc__ = LOGNORMAL_DOC

    @parametrization(family=Lognormal, name="logMeanSd")
    class _LogMeanSd(Parametrization):
        """
        Log-scale parametrization of lognormal distribution.

        Parameters
        ----------
        meanlog : float, default 0.0
            Mean of log(X)
        sdlog : float, default 1.0
            Standard deviation of log(X)
        """

        meanlog: float = 0.0
        sdlog: float = 1.0

        @constraint(description="sdlog > 0")
        def check_sdlog_positive(self) -> bool:
            return self.sdlog > 0

        @constraint(description="meanlog is finite")
        def check_meanlog_finite(self) -> bool:
            return math.isfinite(self.meanlog)

    @parametrization(family=Lognormal, name="meanSd")
    class _MeanSd(Parametrization):
        """
        Arithmetic mean/sd parametrization of lognormal distribution.

        Parameters
        ----------
        mean : float
            Mean of X
        sd : float
            Standard deviation of X
        """

        mean: float
        sd: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return self.mean > 0

        @constraint(description="sd > 0")
        def check_sd_positive(self) -> bool:
            return self.sd > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            meanlog, sdlog = log_moments(self.mean, self.sd)
            return _LogMeanSd(meanlog=meanlog, sdlog=sdlog)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Lognormal)

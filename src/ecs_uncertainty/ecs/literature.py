"""
Literature-based ECS distributions.

Helpers turning reported climate sensitivity estimates (a best estimate with
"likely" 17-83 % and "very likely" 5-95 % ranges) into lognormal
distributions, plus the Sherwood et al. (2020) evidence table.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import ndtri

from ecs_uncertainty.families.builtins.continuous.lognormal import log_moments
from ecs_uncertainty.families.configuration import configure_families_register
from ecs_uncertainty.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ecs_uncertainty.sampling import RandomSource
    from ecs_uncertainty.types import ArrayLike, NumericArray

logger = logging.getLogger(__name__)

type PercentileRange = tuple[float, float]
"""``(lower, upper)`` bounds of a reported central range."""

Z_95 = float(ndtri(0.95))
Z_83 = float(ndtri(0.83))
Z_75 = float(ndtri(0.75))


def _width(bounds: PercentileRange, label: str) -> float:
    lower, upper = bounds
    if not (math.isfinite(lower) and math.isfinite(upper)) or upper < lower:
        raise ValueError(f"Invalid {label} range: {bounds}")
    return upper - lower


def estimate_sigma(ci_5_95: PercentileRange, ci_17_83: PercentileRange) -> float:
    """
    Standard deviation implied by two reported percentile ranges.

    Each range is read as a symmetric normal interval: the 5-95 % width spans
    ``2·z(0.95)`` standard deviations and the 17-83 % width spans
    ``2·z(0.83)``. The two estimates are averaged.

    Parameters
    ----------
    ci_5_95 : tuple of float
        Very likely range ``(5th, 95th)`` percentiles.
    ci_17_83 : tuple of float
        Likely range ``(17th, 83rd)`` percentiles.

    Returns
    -------
    float

    Raises
    ------
    ValueError
        If a range is not finite or is reversed.
    """
    sigma_5_95 = _width(ci_5_95, "5-95%") / (2 * Z_95)
    sigma_17_83 = _width(ci_17_83, "17-83%") / (2 * Z_83)
    return (sigma_5_95 + sigma_17_83) / 2


def lognormal_parameters(mean: float, sd: float) -> tuple[float, float]:
    """
    ``(meanlog, sdlog)`` of the lognormal with arithmetic ``mean`` and ``sd``.

    Raises
    ------
    ValueError
        If ``mean`` or ``sd`` is not positive.
    """
    if not (mean > 0 and sd > 0):
        raise ValueError(f"Lognormal mean and sd must be positive, got mean={mean}, sd={sd}")
    return log_moments(mean, sd)


def lognormal_from_median_range(median: float, lower: float, upper: float) -> tuple[float, float]:
    """
    Lognormal fitted to a median and an interquartile-style range.

    ``meanlog = log(median)`` and
    ``sdlog = (log(upper) - log(lower)) / (2·z(0.75))``.

    Raises
    ------
    ValueError
        If the values are not positive or ``upper <= lower``.
    """
    if not (median > 0 and lower > 0 and upper > lower):
        raise ValueError(
            f"Need 0 < lower < upper and median > 0, got {median=}, {lower=}, {upper=}"
        )
    return math.log(median), (math.log(upper) - math.log(lower)) / (2 * Z_75)


def lognormal_from_values(values: ArrayLike) -> tuple[float, float]:
    """
    Lognormal fitted to positive observations by the moments of their logs.

    Returns
    -------
    tuple of float
        Mean and sample standard deviation (``ddof=1``) of ``log(values)``.

    Raises
    ------
    ValueError
        If fewer than two values are given or any value is not positive.
    """
    data = np.asarray(values, dtype=float).ravel()
    if data.size < 2:
        raise ValueError("At least two values are needed to fit a lognormal")
    if not np.all(data > 0):
        raise ValueError("Lognormal fit requires strictly positive values")
    logs = np.log(data)
    return float(logs.mean()), float(logs.std(ddof=1))


def generate_lognormal_samples(
    mean: float, sd: float, n: int, rng: RandomSource = None
) -> NumericArray:
    """
    Draw ``n`` lognormal values with arithmetic ``mean`` and ``sd``.

    Parameters
    ----------
    mean, sd : float
        Arithmetic mean and standard deviation of the samples' distribution.
    n : int
        Sample size.
    rng : Generator, int or None
        Random source.
    """
    family = configure_families_register().get(FamilyName.LOGNORMAL)
    distribution = family.distribution("meanSd", mean=mean, sd=sd)
    logger.debug("Drawing %d lognormal samples with mean=%s, sd=%s", n, mean, sd)
    return distribution.sample(n, rng)


@dataclass(frozen=True, slots=True)
class EvidenceEstimate:
    """
    A reported ECS estimate for one line-of-evidence configuration.

    Attributes
    ----------
    name : str
        Configuration label.
    best_estimate : float
        Central (median) estimate in K.
    very_likely : tuple of float
        5-95 % range.
    likely : tuple of float
        17-83 % range.
    """

    name: str
    best_estimate: float
    very_likely: PercentileRange
    likely: PercentileRange

    @property
    def sigma(self) -> float:
        """Standard deviation implied by the two ranges."""
        return estimate_sigma(self.very_likely, self.likely)

    def lognormal_parameters(self) -> tuple[float, float]:
        return lognormal_parameters(self.best_estimate, self.sigma)

    def sample(self, n: int, rng: RandomSource = None) -> NumericArray:
        """Lognormal ECS draws centred on the best estimate."""
        return generate_lognormal_samples(self.best_estimate, self.sigma, n, rng)


SHERWOOD_2020: Mapping[str, EvidenceEstimate] = MappingProxyType(
    {
        estimate.name: estimate
        for estimate in (
            EvidenceEstimate("baseline", 3.2, (2.3, 4.7), (2.6, 3.9)),
            EvidenceEstimate("no_historical", 3.1, (2.0, 4.6), (2.3, 3.7)),
            EvidenceEstimate("no_paleo_cold", 3.4, (2.3, 5.1), (2.6, 4.1)),
        )
    }
)
"""ECS estimates of Sherwood et al. (2020), Table 10, by evidence configuration."""


def get_evidence(name: str) -> EvidenceEstimate:
    """
    Look up a Sherwood et al. (2020) configuration by name.

    Raises
    ------
    KeyError
        If the configuration is unknown.
    """
    try:
        return SHERWOOD_2020[name]
    except KeyError:
        known = ", ".join(SHERWOOD_2020)
        raise KeyError(f"Unknown evidence configuration {name!r}. Known: {known}") from None

"""
Truncation subpackage

Generic truncated distributions over any registered base family:

- the six kernel operations (:mod:`.kernel`);
- numerical integration with surfaced failures (:mod:`.integration`);
- a bound truncated distribution object (:mod:`.distribution`).
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import TruncatedDistribution
from .integration import integrate, integrate_pieces
from .kernel import (
    cdf_trunc,
    density_trunc,
    interval_mass,
    mean_trunc,
    quantile_trunc,
    resolve_family,
    sample_trunc,
    variance_trunc,
)

__all__ = [
    # kernel
    "density_trunc",
    "mean_trunc",
    "variance_trunc",
    "cdf_trunc",
    "quantile_trunc",
    "sample_trunc",
    "interval_mass",
    "resolve_family",
    # helpers
    "integrate",
    "integrate_pieces",
    "TruncatedDistribution",
]

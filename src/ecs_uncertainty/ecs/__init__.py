"""
ECS helpers

Building climate sensitivity distributions from literature estimates and
summarising weighted model ensembles.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from .literature import (
    SHERWOOD_2020,
    EvidenceEstimate,
    estimate_sigma,
    generate_lognormal_samples,
    get_evidence,
    lognormal_from_median_range,
    lognormal_from_values,
    lognormal_parameters,
)
from .weighting import (
    credible_interval,
    score_ramp,
    score_runs,
    weighted_median,
    weighted_quantile,
)

__all__ = [
    "SHERWOOD_2020",
    "EvidenceEstimate",
    "estimate_sigma",
    "generate_lognormal_samples",
    "get_evidence",
    "lognormal_from_median_range",
    "lognormal_from_values",
    "lognormal_parameters",
    "credible_interval",
    "score_ramp",
    "score_runs",
    "weighted_median",
    "weighted_quantile",
]

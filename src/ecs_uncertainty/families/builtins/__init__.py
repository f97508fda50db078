"""
Built-in distribution families.

This package contains the standard families available by default to the
truncation kernel.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"


from ecs_uncertainty.families.builtins.continuous import (
    configure_exponential_family,
    configure_gamma_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_uniform_family,
    log_moments,
)

__all__ = [
    "configure_normal_family",
    "configure_lognormal_family",
    "configure_gamma_family",
    "configure_exponential_family",
    "configure_uniform_family",
    "log_moments",
]

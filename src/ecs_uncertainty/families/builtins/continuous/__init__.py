"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"


from ecs_uncertainty.families.builtins.continuous.exponential import configure_exponential_family
from ecs_uncertainty.families.builtins.continuous.gamma import configure_gamma_family
from ecs_uncertainty.families.builtins.continuous.lognormal import (
    configure_lognormal_family,
    log_moments,
)
from ecs_uncertainty.families.builtins.continuous.normal import configure_normal_family
from ecs_uncertainty.families.builtins.continuous.uniform import configure_uniform_family

__all__ = [
    "configure_normal_family",
    "configure_lognormal_family",
    "configure_gamma_family",
    "configure_exponential_family",
    "configure_uniform_family",
    "log_moments",
]

"""
Distribution Families Configuration
===================================

Registers the built-in parametric families in the global
:class:`~ecs_uncertainty.families.registry.ParametricFamilyRegister`:

- ``norm``: Normal, mean/sd and mean/precision;
- ``lnorm``: Lognormal, log-scale and arithmetic mean/sd;
- ``gamma``: Gamma, shape/rate and shape/scale;
- ``exp``: Exponential, rate and scale;
- ``unif``: Uniform on [lower, upper].

Families registered by users afterwards are resolved the same way.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from ecs_uncertainty.families.builtins import (
    configure_exponential_family,
    configure_gamma_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_uniform_family,
)
from ecs_uncertainty.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_lognormal_family()
    configure_gamma_family()
    configure_exponential_family()
    configure_uniform_family()
    registry = ParametricFamilyRegister()
    logger.debug("Configured families: %s", registry.list_registered_families())
    return registry


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()

"""
ECS Uncertainty
===============

Truncated probability distributions for equilibrium climate sensitivity
(ECS) uncertainty analysis: a parametric family registry, a generic
truncation kernel over any registered family, and helpers building ECS
distributions from literature estimates.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import Settings, load_settings, reset_settings
from .ecs import *
from .ecs import __all__ as _ecs_all
from .exceptions import (
    DegenerateMassError,
    IntegrationFailureError,
    InvalidIntervalError,
    TruncationError,
    UnknownDistributionFamilyError,
)
from .families import *
from .families import __all__ as _family_all
from .truncation import *
from .truncation import __all__ as _truncation_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("ecs-uncertainty")
__all__ = [
    "__version__",
    "Settings",
    "load_settings",
    "reset_settings",
    "TruncationError",
    "UnknownDistributionFamilyError",
    "InvalidIntervalError",
    "DegenerateMassError",
    "IntegrationFailureError",
    *_ecs_all,
    *_family_all,
    *_truncation_all,
    *_types_all,
]

del _ecs_all
del _family_all
del _truncation_all
del _types_all

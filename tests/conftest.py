from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from ecs_uncertainty.config import reset_settings
from ecs_uncertainty.families.configuration import reset_families_register

pytest.importorskip("scipy")

_ENV_VARS = (
    "ECS_QUAD_LIMIT",
    "ECS_QUAD_EPSABS",
    "ECS_QUAD_EPSREL",
    "ECS_MASS_TOLERANCE",
    "ECS_SEED",
)


@pytest.fixture(autouse=True)
def _fresh_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, Any, None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_families_register()
    reset_settings()
    yield
    reset_families_register()
    reset_settings()

"""
Tests for the global family register.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from ecs_uncertainty.exceptions import UnknownDistributionFamilyError
from ecs_uncertainty.families import ParametricFamilyRegister
from tests.utils.families import make_cauchy_family


class TestParametricFamilyRegister:
    def test_singleton(self) -> None:
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_register_and_get(self) -> None:
        family = make_cauchy_family()
        assert ParametricFamilyRegister.contains("cauchy")
        assert ParametricFamilyRegister.get("cauchy") is family
        assert "cauchy" in ParametricFamilyRegister.list_registered_families()

    def test_duplicate_name_rejected(self) -> None:
        make_cauchy_family()
        with pytest.raises(ValueError, match="already"):
            ParametricFamilyRegister.register(make_cauchy_family(register=False))

    def test_unknown_name(self) -> None:
        make_cauchy_family()
        with pytest.raises(UnknownDistributionFamilyError, match="cauchy"):
            ParametricFamilyRegister.get("nonexistent")

    def test_unknown_family_error_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            ParametricFamilyRegister.get("nonexistent")

    def test_reset_forgets_families(self) -> None:
        make_cauchy_family()
        ParametricFamilyRegister._reset()
        assert not ParametricFamilyRegister.contains("cauchy")

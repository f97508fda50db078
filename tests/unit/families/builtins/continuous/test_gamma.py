"""
Tests for Gamma Distribution Family
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import gamma

from ecs_uncertainty.families.configuration import configure_families_register
from ecs_uncertainty.types import FamilyName

from .base import BaseDistributionTest


class TestGammaFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.GAMMA)

    @pytest.mark.parametrize("shape", [0.5, 1.0, 2.5])
    def test_against_scipy(self, shape):
        self.assert_matches_frozen(
            self.family(shape=shape, rate=2.0),
            gamma(a=shape, scale=0.5),
            x=[0.05, 0.5, 1.0, 2.0, 4.0],
            p=[0.01, 0.1, 0.5, 0.9, 0.99],
        )

    def test_shape_scale_parametrization(self):
        dist = self.family(shape=2.0, scale=3.0, parametrization_name="shapeScale")
        assert dist.mean() == pytest.approx(6.0)
        assert dist.var() == pytest.approx(18.0)

    def test_shape_is_required(self):
        with pytest.raises(TypeError):
            self.family(rate=1.0)

    def test_density_outside_support(self):
        dist = self.family(shape=2.0, rate=1.0)
        np.testing.assert_array_equal(dist.pdf([-1.0, np.inf]), [0.0, 0.0])
        assert dist.cdf(-1.0) == 0.0
        assert dist.cdf(np.inf) == 1.0

    def test_constraints(self):
        with pytest.raises(ValueError, match="shape > 0"):
            self.family(shape=0.0)
        with pytest.raises(ValueError, match="scale > 0"):
            self.family(shape=1.0, scale=-2.0, parametrization_name="shapeScale")

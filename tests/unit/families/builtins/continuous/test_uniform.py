"""
Tests for Uniform Distribution Family
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import uniform

from ecs_uncertainty.families.configuration import configure_families_register
from ecs_uncertainty.types import FamilyName, Interval1D

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.UNIFORM)
        self.dist = self.family(lower=1.0, upper=4.0)

    def test_against_scipy(self):
        self.assert_matches_frozen(
            self.dist,
            uniform(loc=1.0, scale=3.0),
            x=[0.0, 1.0, 2.5, 4.0, 5.0],
            p=[0.0, 0.25, 0.5, 1.0],
        )

    def test_support_is_parameter_dependent(self):
        assert self.dist.support == Interval1D(1.0, 4.0)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"lower": 2.0, "upper": 1.0}, "lower < upper"),
            ({"lower": 0.0, "upper": math.inf}, "bounds are finite"),
        ],
    )
    def test_constraints(self, params, message):
        with pytest.raises(ValueError, match=message):
            self.family(**params)

    def test_sampling_within_bounds(self):
        sample = self.dist.sample(1000, rng=np.random.default_rng(2))
        assert np.all((sample >= 1.0) & (sample < 4.0))

"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from ecs_uncertainty.families.configuration import configure_families_register
from ecs_uncertainty.types import FamilyName, Interval1D

from .base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mean=2.0, sd=1.5)

    def test_family_properties(self):
        assert self.normal_family.name == FamilyName.NORMAL
        assert self.normal_family.parametrization_names == ["meanSd", "meanPrec"]
        assert self.normal_family.base_parametrization_name == "meanSd"

    def test_defaults_are_standard_normal(self):
        assert self.normal_family().parameters.parameters == {"mean": 0.0, "sd": 1.0}

    def test_mean_prec_parametrization_creation(self):
        dist = self.normal_family(mean=2.0, tau=0.25, parametrization_name="meanPrec")

        assert dist.parameters.parameters == {"mean": 2.0, "tau": 0.25}
        assert dist.parametrization_name == "meanPrec"

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="sd > 0"):
            self.normal_family(mean=0, sd=-1.0)

        with pytest.raises(ValueError, match="tau > 0"):
            self.normal_family(mean=0, tau=-1.0, parametrization_name="meanPrec")

        with pytest.raises(ValueError, match="mean is finite"):
            self.normal_family(mean=math.inf, sd=1.0)

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mean, expected_sd",
        [
            ("meanSd", {"mean": 2.0, "sd": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mean": 2.0, "tau": 0.25}, 2.0, math.sqrt(1 / 0.25)),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mean, expected_sd
    ):
        base_params = self.normal_family.to_base(
            self.normal_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["mean"] - expected_mean) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sd"] - expected_sd) < self.CALCULATION_PRECISION

    def test_against_scipy(self):
        self.assert_matches_frozen(
            self.normal_dist_example,
            norm(loc=2.0, scale=1.5),
            x=[-1.0, 0.0, 1.0, 2.0, 3.0, 4.0],
            p=[0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
        )

    def test_mean_prec_characteristics(self):
        dist = self.normal_family(mean=2.0, tau=1 / 2.25, parametrization_name="meanPrec")
        x = np.array([0.0, 2.0, 5.0])
        self.assert_arrays_almost_equal(dist.cdf(x), norm.cdf(x, loc=2.0, scale=1.5))

    def test_quantile_edges_and_domain(self):
        ppf = self.normal_dist_example.ppf
        np.testing.assert_array_equal(ppf([0.0, 1.0]), [-np.inf, np.inf])
        with pytest.raises(ValueError, match="Probability"):
            ppf([0.5, 1.5])

    def test_sampling(self):
        sample = self.normal_dist_example.sample(20_000, rng=5)
        assert sample.shape == (20_000,)
        assert abs(sample.mean() - 2.0) < 4 * 1.5 / math.sqrt(20_000)

    def test_normal_support(self):
        assert self.normal_dist_example.support == Interval1D()

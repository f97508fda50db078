"""
Tests for the error conditions of the kernel operations.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from collections.abc import Callable
from typing import Any

import pytest
from scipy.integrate import IntegrationWarning

from ecs_uncertainty.config import reset_settings
from ecs_uncertainty.exceptions import (
    DegenerateMassError,
    IntegrationFailureError,
    InvalidIntervalError,
    TruncationError,
    UnknownDistributionFamilyError,
)
from ecs_uncertainty.truncation import (
    cdf_trunc,
    density_trunc,
    interval_mass,
    mean_trunc,
    quantile_trunc,
    sample_trunc,
    variance_trunc,
)
from tests.utils.families import make_density_only_family

OPERATIONS: dict[str, Callable[..., Any]] = {
    "density": lambda spec, a, b, **theta: density_trunc(0.5, spec, a, b, **theta),
    "mean": mean_trunc,
    "variance": variance_trunc,
    "cdf": lambda spec, a, b, **theta: cdf_trunc(0.5, spec, a, b, **theta),
    "quantile": lambda spec, a, b, **theta: quantile_trunc(0.5, spec, a, b, **theta),
    "sample": lambda spec, a, b, **theta: sample_trunc(5, spec, a, b, rng=0, **theta),
}


@pytest.fixture(params=list(OPERATIONS), ids=list(OPERATIONS))
def operation(request: pytest.FixtureRequest) -> Callable[..., Any]:
    return OPERATIONS[request.param]


class TestErrorsForEveryOperation:
    def test_unknown_family(self, operation) -> None:
        with pytest.raises(UnknownDistributionFamilyError, match="weibull"):
            operation("weibull", 0.0, 1.0)

    def test_unsupported_spec_type(self, operation) -> None:
        with pytest.raises(UnknownDistributionFamilyError):
            operation(42, 0.0, 1.0)

    def test_family_without_cdf_or_quantile(self, operation) -> None:
        with pytest.raises(UnknownDistributionFamilyError):
            operation(make_density_only_family(), 0.0, 1.0)

    @pytest.mark.parametrize("a, b", [(2.0, 1.0), (math.nan, 1.0), (0.0, math.nan)])
    def test_invalid_interval(self, operation, a, b) -> None:
        with pytest.raises(InvalidIntervalError):
            operation("norm", a, b)

    @pytest.mark.parametrize(
        "spec, a, b, theta",
        [
            ("norm", 1.0, 1.0, {}),
            ("norm", 10.0, 20.0, {}),
            ("unif", 5.0, 6.0, {"lower": 0.0, "upper": 1.0}),
            ("lnorm", -5.0, 0.0, {}),
        ],
    )
    def test_zero_mass(self, operation, spec, a, b, theta) -> None:
        with pytest.raises(DegenerateMassError):
            operation(spec, a, b, **theta)

    def test_invalid_parameters(self, operation) -> None:
        with pytest.raises(ValueError, match="sd > 0"):
            operation("norm", 0.0, 1.0, mean=0.0, sd=-1.0)


class TestErrorDetails:
    def test_hierarchy(self) -> None:
        for error in (
            UnknownDistributionFamilyError,
            InvalidIntervalError,
            DegenerateMassError,
            IntegrationFailureError,
        ):
            assert issubclass(error, TruncationError)
        assert issubclass(DegenerateMassError, ValueError)
        assert issubclass(IntegrationFailureError, RuntimeError)

    def test_degenerate_mass_carries_interval(self) -> None:
        with pytest.raises(DegenerateMassError) as excinfo:
            interval_mass("unif", 2.0, 3.0)
        assert excinfo.value.mass == 0.0
        assert (excinfo.value.a, excinfo.value.b) == (2.0, 3.0)

    def test_mass_tolerance_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert interval_mass("norm", 3.0) == pytest.approx(0.0013499, rel=1e-4)

        monkeypatch.setenv("ECS_MASS_TOLERANCE", "0.01")
        reset_settings()
        with pytest.raises(DegenerateMassError):
            interval_mass("norm", 3.0)

    def test_probability_outside_unit_interval(self) -> None:
        with pytest.raises(ValueError, match="Probability"):
            quantile_trunc([0.5, 1.5], "norm", -1.0, 1.0)
        with pytest.raises(ValueError, match="Probability"):
            quantile_trunc(-0.1, "gamma", 0.0, 2.0, shape=2.0)

    @pytest.mark.parametrize("moment", [mean_trunc, variance_trunc])
    def test_integration_failure(self, monkeypatch: pytest.MonkeyPatch, moment) -> None:
        def failing_quad(func, a, b, **kwargs):
            warnings.warn("maximum number of subdivisions achieved", IntegrationWarning)
            return 0.0, 1.0

        monkeypatch.setattr("scipy.integrate.quad", failing_quad)
        with pytest.raises(IntegrationFailureError, match="did not converge"):
            moment("norm", -1.0, 1.0)

"""
Tests for the numerical integration helper.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import Any

import pytest
from scipy.integrate import IntegrationWarning

from ecs_uncertainty.config import Settings
from ecs_uncertainty.exceptions import IntegrationFailureError
from ecs_uncertainty.truncation import integrate, integrate_pieces


class TestIntegrate:
    def test_finite_interval(self) -> None:
        value, abserr = integrate(lambda x: x**2, 0.0, 3.0)
        assert value == pytest.approx(9.0)
        assert abserr < 1e-8

    def test_improper_interval(self) -> None:
        value, _ = integrate(lambda x: math.exp(-x), 0.0, math.inf)
        assert value == pytest.approx(1.0)

    def test_settings_are_forwarded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, Any] = {}

        def recording_quad(func, a, b, **kwargs):
            seen.update(kwargs)
            return 1.0, 0.0

        monkeypatch.setattr("scipy.integrate.quad", recording_quad)
        integrate(lambda x: x, 0.0, 1.0, Settings(quad_limit=17, quad_epsabs=1e-5, quad_epsrel=0))

        assert seen == {"limit": 17, "epsabs": 1e-5, "epsrel": 0}

    def test_environment_settings_are_used(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, Any] = {}

        def recording_quad(func, a, b, **kwargs):
            seen.update(kwargs)
            return 1.0, 0.0

        monkeypatch.setenv("ECS_QUAD_LIMIT", "31")
        monkeypatch.setattr("scipy.integrate.quad", recording_quad)
        integrate(lambda x: x, 0.0, 1.0)

        assert seen["limit"] == 31

    def test_warning_becomes_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def warning_quad(func, a, b, **kwargs):
            warnings.warn("roundoff error is detected", IntegrationWarning)
            return 0.5, 0.1

        monkeypatch.setattr("scipy.integrate.quad", warning_quad)
        with pytest.raises(IntegrationFailureError, match="roundoff"):
            integrate(lambda x: x, 0.0, 1.0)

    def test_non_finite_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("scipy.integrate.quad", lambda func, a, b, **kwargs: (math.nan, 0.0))
        with pytest.raises(IntegrationFailureError, match="non-finite"):
            integrate(lambda x: x, 0.0, 1.0)


class TestIntegratePieces:
    def test_sums_pieces_and_skips_empty_ones(self) -> None:
        value, abserr = integrate_pieces(lambda x: x**2, [0.0, 1.0, 1.0, 3.0])
        assert value == pytest.approx(9.0)
        assert abserr < 1e-8

    def test_finds_mass_far_from_origin(self) -> None:
        def density(x: float) -> float:
            return math.exp(-0.5 * (x - 100.0) ** 2) / math.sqrt(2 * math.pi)

        value, _ = integrate_pieces(density, [-math.inf, 97.0, 100.0, 103.0, math.inf])
        assert value == pytest.approx(1.0, rel=1e-8)

    def test_failure_in_any_piece(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[float, float]] = []

        def flaky_quad(func, a, b, **kwargs):
            calls.append((a, b))
            if len(calls) == 2:
                warnings.warn("the integral is probably divergent", IntegrationWarning)
            return 1.0, 0.0

        monkeypatch.setattr("scipy.integrate.quad", flaky_quad)
        with pytest.raises(IntegrationFailureError, match="divergent"):
            integrate_pieces(lambda x: x, [0.0, 1.0, 2.0, 3.0])
        assert calls == [(0.0, 1.0), (1.0, 2.0)]

"""
Numerical integration over finite or infinite intervals.

Thin wrapper around :func:`scipy.integrate.quad` that turns every
convergence problem into :class:`~ecs_uncertainty.exceptions.IntegrationFailureError`
instead of a warning and a possibly wrong value.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import warnings
from typing import TYPE_CHECKING

from scipy import integrate as _sp_integrate

from ecs_uncertainty.config import load_settings
from ecs_uncertainty.exceptions import IntegrationFailureError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ecs_uncertainty.config import Settings
    from ecs_uncertainty.types import ScalarFunc

logger = logging.getLogger(__name__)


def integrate(
    func: ScalarFunc,
    a: float,
    b: float,
    settings: Settings | None = None,
) -> tuple[float, float]:
    """
    Definite integral of ``func`` over ``[a, b]``.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar integrand.
    a, b : float
        Integration limits; ``-inf`` / ``inf`` give improper integrals.
    settings : Settings, optional
        Integration limit and tolerances; defaults to :func:`load_settings`.

    Returns
    -------
    tuple[float, float]
        Integral value and absolute error estimate.

    Raises
    ------
    IntegrationFailureError
        If ``quad`` reports a problem (round-off, subdivision limit,
        divergence) or the value is not finite.
    """
    settings = load_settings() if settings is None else settings

    with warnings.catch_warnings():
        warnings.simplefilter("error", _sp_integrate.IntegrationWarning)
        try:
            value, abserr = _sp_integrate.quad(
                func,
                a,
                b,
                limit=settings.quad_limit,
                epsabs=settings.quad_epsabs,
                epsrel=settings.quad_epsrel,
            )
        except _sp_integrate.IntegrationWarning as exc:
            raise IntegrationFailureError(
                f"Integration over [{a}, {b}] did not converge: {exc}"
            ) from exc

    if not math.isfinite(value):
        raise IntegrationFailureError(f"Integration over [{a}, {b}] gave non-finite value {value}")

    logger.debug("Integral over [%s, %s] = %.12g (abserr %.3g)", a, b, value, abserr)
    return float(value), float(abserr)


def integrate_pieces(
    func: ScalarFunc,
    breakpoints: Sequence[float],
    settings: Settings | None = None,
) -> tuple[float, float]:
    """
    Definite integral of ``func`` summed over consecutive breakpoint pieces.

    ``quad`` maps an infinite range onto ``(0, 1]`` and can miss mass lying
    far from the origin without reporting an error. Finite interior
    breakpoints placed where the mass sits keep every piece sampled.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar integrand.
    breakpoints : sequence of float
        Non-decreasing limits; the outer ones may be infinite. Empty pieces
        are skipped.
    settings : Settings, optional
        Forwarded to :func:`integrate`.

    Returns
    -------
    tuple[float, float]
        Summed value and summed absolute error estimate.
    """
    value, abserr = 0.0, 0.0
    for left, right in zip(breakpoints[:-1], breakpoints[1:], strict=True):
        if not left < right:
            continue
        piece, piece_err = integrate(func, left, right, settings)
        value += piece
        abserr += piece_err
    return value, abserr

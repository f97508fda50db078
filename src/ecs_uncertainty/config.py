"""
Runtime Settings
================

Numerical settings of the truncation kernel, read from environment variables
(optionally through a ``.env`` file):

- ``ECS_QUAD_LIMIT``: subinterval limit passed to :func:`scipy.integrate.quad`;
- ``ECS_QUAD_EPSABS`` / ``ECS_QUAD_EPSREL``: absolute / relative tolerances;
- ``ECS_MASS_TOLERANCE``: interval mass at or below which the truncated
  distribution is considered degenerate;
- ``ECS_SEED``: default seed of the uniform source used by samplers.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "ECS_"


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Numerical settings shared by the kernel operations.

    Parameters
    ----------
    quad_limit : int, default 200
        Upper bound on the number of subintervals used by ``quad``.
    quad_epsabs : float, default 1.49e-8
        Absolute error tolerance of ``quad``.
    quad_epsrel : float, default 1.49e-8
        Relative error tolerance of ``quad``.
    mass_tolerance : float, default 0.0
        Interval masses ``Z <= mass_tolerance`` are rejected.
    seed : int or None, default None
        Seed used when a sampler is called without an explicit generator.
    """

    quad_limit: int = 200
    quad_epsabs: float = 1.49e-8
    quad_epsrel: float = 1.49e-8
    mass_tolerance: float = 0.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.quad_limit < 1:
            raise ValueError(f"quad_limit must be positive, got {self.quad_limit}")
        if self.quad_epsabs < 0 or self.quad_epsrel < 0:
            raise ValueError("Integration tolerances must be non-negative")
        if not 0.0 <= self.mass_tolerance < 1.0:
            raise ValueError(f"mass_tolerance must lie in [0, 1), got {self.mass_tolerance}")


def _read(name: str) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _parse(name: str, cast: type[int] | type[float]) -> int | float | None:
    raw = _read(name)
    if raw is None:
        return None
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(
            f"Environment variable {ENV_PREFIX}{name}={raw!r} is not a valid {cast.__name__}"
        ) from exc


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """
    Build the settings from the environment.

    A ``.env`` file found by :func:`dotenv.load_dotenv` is honoured, without
    overriding variables already present in the environment. The result is
    cached; call :func:`reset_settings` after changing the environment.

    Returns
    -------
    Settings
        Settings with environment overrides applied.

    Raises
    ------
    ValueError
        If a variable cannot be parsed or violates a settings constraint.
    """
    load_dotenv(override=False)

    overrides: dict[str, int | float] = {}
    for field, env_name, cast in (
        ("quad_limit", "QUAD_LIMIT", int),
        ("quad_epsabs", "QUAD_EPSABS", float),
        ("quad_epsrel", "QUAD_EPSREL", float),
        ("mass_tolerance", "MASS_TOLERANCE", float),
        ("seed", "SEED", int),
    ):
        value = _parse(env_name, cast)
        if value is not None:
            overrides[field] = value

    settings = Settings(**overrides)  # type: ignore[arg-type]
    logger.debug("Loaded settings %s", settings)
    return settings


def reset_settings() -> None:
    """Drop the cached settings."""
    load_settings.cache_clear()


__all__ = ["Settings", "load_settings", "reset_settings"]

"""
Exceptions raised by the families registry and the truncation kernel.
"""

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"


class TruncationError(Exception):
    """Base class for errors signalled by the truncation kernel."""


class UnknownDistributionFamilyError(TruncationError, LookupError):
    """Family name is not registered or the family lacks a required primitive."""


class InvalidIntervalError(TruncationError, ValueError):
    """Truncation interval has ``a > b`` or a NaN bound."""


class DegenerateMassError(TruncationError, ValueError):
    """Base family assigns no probability mass to the truncation interval."""

    def __init__(self, mass: float, a: float, b: float) -> None:
        self.mass = mass
        self.a = a
        self.b = b
        super().__init__(
            f"Probability mass {mass!r} of interval [{a}, {b}] is not positive; "
            "truncated distribution is undefined"
        )


class IntegrationFailureError(TruncationError, RuntimeError):
    """Numerical integration did not converge or produced a non-finite value."""


__all__ = [
    "DegenerateMassError",
    "IntegrationFailureError",
    "InvalidIntervalError",
    "TruncationError",
    "UnknownDistributionFamilyError",
]

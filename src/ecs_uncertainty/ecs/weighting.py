"""
Weighted summaries of model ensembles.

Used to report the median and credible interval of projected warming from
runs weighted by their skill against observations.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from ecs_uncertainty.types import ArrayLike, NumericArray


def _prepare(values: ArrayLike, weights: ArrayLike) -> tuple[NumericArray, NumericArray]:
    v = np.asarray(values, dtype=float).ravel()
    w = np.asarray(weights, dtype=float).ravel()
    if v.shape != w.shape:
        raise ValueError(f"values and weights differ in length: {v.size} != {w.size}")
    if v.size == 0:
        raise ValueError("Cannot summarise an empty sample")
    if not (np.all(np.isfinite(v)) and np.all(np.isfinite(w))):
        raise ValueError("values and weights must be finite")
    if np.any(w < 0):
        raise ValueError("weights must be non-negative")
    if not np.any(w > 0):
        raise ValueError("weights must not all be zero")

    keep = w > 0
    sorter = np.argsort(v[keep], kind="stable")
    return v[keep][sorter], w[keep][sorter]


def weighted_quantile(values: ArrayLike, weights: ArrayLike, probs: ArrayLike) -> NumericArray:
    """
    Quantiles of a weighted sample.

    Each sorted value sits at the centre of its block of normalised cumulative
    weight and the quantile function interpolates linearly between centres;
    probabilities below the first (above the last) centre give the smallest
    (largest) value. Zero-weight values are ignored.

    Parameters
    ----------
    values : array_like
        Sample values.
    weights : array_like
        Non-negative weights, one per value.
    probs : array_like
        Probabilities in ``[0, 1]``.

    Returns
    -------
    numpy.ndarray
        Quantiles with the shape of ``probs``.

    Raises
    ------
    ValueError
        On mismatched lengths, negative or all-zero weights, non-finite
        input or probabilities outside ``[0, 1]``.
    """
    v, w = _prepare(values, weights)
    p = np.asarray(probs, dtype=float)
    if np.any(np.isnan(p)) or np.any((p < 0) | (p > 1)):
        raise ValueError("Probabilities must be in [0, 1]")

    cumulative = np.cumsum(w)
    cumulative /= cumulative[-1]
    centres = cumulative - w / w.sum() / 2
    return cast("NumericArray", np.interp(p, centres, v))


def weighted_median(values: ArrayLike, weights: ArrayLike) -> float:
    """Weighted median, see :func:`weighted_quantile`."""
    return float(weighted_quantile(values, weights, 0.5))


def credible_interval(
    values: ArrayLike, weights: ArrayLike, level: float = 0.9
) -> tuple[float, float, float]:
    """
    Weighted median and central credible interval.

    Parameters
    ----------
    level : float, default 0.9
        Interval probability; ``0.9`` gives the 5-95 % range.

    Returns
    -------
    tuple of float
        ``(median, lower, upper)``.
    """
    if not 0 < level < 1:
        raise ValueError(f"level must be in (0, 1), got {level}")
    tail = (1 - level) / 2
    median, lower, upper = weighted_quantile(values, weights, [0.5, tail, 1 - tail])
    return float(median), float(lower), float(upper)


def score_ramp(deviation: ArrayLike, w1: float = 0.0, w2: float = 12.0) -> NumericArray:
    """
    Ramp score of deviations from observations.

    The score is ``1`` for ``|deviation| <= w1``, ``0`` for
    ``|deviation| >= w2`` and falls linearly in between.

    Parameters
    ----------
    deviation : array_like
        Differences between modelled and observed values.
    w1, w2 : float
        Ramp start and end, ``0 <= w1 < w2``.

    Raises
    ------
    ValueError
        If the ramp bounds are invalid.
    """
    if not 0 <= w1 < w2:
        raise ValueError(f"Need 0 <= w1 < w2, got w1={w1}, w2={w2}")
    distance = np.abs(np.asarray(deviation, dtype=float))
    return cast("NumericArray", np.clip((w2 - distance) / (w2 - w1), 0.0, 1.0))


def score_runs(
    runs: ArrayLike, observed: ArrayLike, w1: float = 0.0, w2: float = 12.0
) -> NumericArray:
    """
    Weight of each run: its mean :func:`score_ramp` against the observations.

    ``runs`` has one row per run and one column per observation.
    """
    modelled = np.atleast_2d(np.asarray(runs, dtype=float))
    target = np.asarray(observed, dtype=float).ravel()
    if modelled.shape[1] != target.size:
        raise ValueError(
            f"Runs have {modelled.shape[1]} values but there are {target.size} observations"
        )
    return cast("NumericArray", score_ramp(modelled - target, w1, w2).mean(axis=1))

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

from .direction import Direction
from .errors import (
    CenterIndexError,
    EmptyInputError,
    InvalidValueError,
    InvalidWeightError,
    LengthMismatchError,
)

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Pool:
    """A merged run of observations covering ``[start, stop)``."""

    value: float
    weight: float
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Regression:
    """Isotonic regression result.

    ``weights`` holds the aggregated weight of the pool each position belongs
    to (the number of points if all weights were one), ``values`` the pooled
    value. Both are read-only arrays indexed like the input.
    """

    weights: np.ndarray
    values: np.ndarray

    def __post_init__(self):
        weights = np.array(self.weights, dtype=np.float64)
        values = np.array(self.values, dtype=np.float64)
        if weights.shape != values.shape or weights.ndim != 1:
            raise LengthMismatchError("Regression weights and values must be equal-sized 1-D arrays")
        object.__setattr__(self, "weights", _readonly(weights))
        object.__setattr__(self, "values", _readonly(values))

    def __len__(self) -> int:
        return self.values.shape[0]

    @classmethod
    def concat(cls, left: "Regression", right: "Regression") -> "Regression":
        return cls(
            weights=np.concatenate([left.weights, right.weights]),
            values=np.concatenate([left.values, right.values]),
        )


def _as_inputs(values: ArrayLike, weights: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    x = np.asarray(values, dtype=np.float64)
    w = np.asarray(weights, dtype=np.float64)
    if x.ndim != 1 or w.ndim != 1:
        raise InvalidValueError("Values and weights must be one-dimensional")
    if x.shape[0] != w.shape[0]:
        raise LengthMismatchError(
            f"Values and weights must be equal-sized (got {x.shape[0]} and {w.shape[0]})"
        )
    if x.shape[0] == 0:
        raise EmptyInputError("Requires at least one observation")
    if not np.all(np.isfinite(x)):
        raise InvalidValueError("Values must be finite")
    if not np.all(np.isfinite(w)) or np.any(w < 0):
        bad = int(np.flatnonzero(~(np.isfinite(w) & (w >= 0)))[0])
        raise InvalidWeightError(f"Weights must be finite and non-negative (index {bad}: {w[bad]})")
    return x, w


def _check_direction(direction: Direction) -> None:
    if not isinstance(direction, Direction):
        raise TypeError(f"direction must be a Direction, got {type(direction).__name__}")


def _merge(below: Tuple[float, float, int], top: Tuple[float, float, int]) -> Tuple[float, float, int]:
    v_below, w_below, start = below
    v_top, w_top, _ = top
    weight = w_below + w_top
    if weight > 0:
        # weight fractions lie in [0, 1], so large finite values cannot overflow
        value = (w_top / weight) * v_top + (w_below / weight) * v_below
    else:
        value = 0.5 * v_top + 0.5 * v_below
    return (value, weight, start)


def _pool_stack(x: np.ndarray, w: np.ndarray, direction: Direction) -> List[Tuple[float, float, int]]:
    # (value, weight, start); adjacent entries always satisfy `direction`
    stack = [(float(x[0]), float(w[0]), 0)]
    merges = 0
    for i in range(1, x.shape[0]):
        stack.append((float(x[i]), float(w[i]), i))
        while len(stack) > 1 and direction.violates(stack[-2][0], stack[-1][0]):
            top = stack.pop()
            stack[-1] = _merge(stack[-1], top)
            merges += 1
    logger.debug("pava %s: n=%d pools=%d merges=%d", direction.value, x.shape[0], len(stack), merges)
    return stack


def fit_pools(values: ArrayLike, weights: ArrayLike, direction: Direction) -> List[Pool]:
    """Run the pool-adjacent-violators pass and return the surviving pools in order."""
    _check_direction(direction)
    x, w = _as_inputs(values, weights)
    stack = _pool_stack(x, w, direction)
    stops = [start for _, _, start in stack[1:]] + [x.shape[0]]
    return [Pool(value=v, weight=wt, start=s, stop=e) for (v, wt, s), e in zip(stack, stops)]


def regress(values: ArrayLike, weights: ArrayLike, direction: Direction) -> Regression:
    r"""Isotonic regression using the Pool-Adjacent-Violators algorithm (PAVA).

    Minimizes :math:`\sum_i w_i (\hat{x}_i - x_i)^2` subject to
    :math:`\hat{x}_i \le \hat{x}_{i+1}` (``Direction.INCREASING``) or
    :math:`\hat{x}_i \ge \hat{x}_{i+1}` (``Direction.DECREASING``).

    Raises a :class:`~pava.core.errors.PAVAError` subclass for mismatched
    lengths, empty input, non-finite values, or negative/non-finite weights.
    """
    pools = fit_pools(values, weights, direction)
    n = pools[-1].stop
    out_w = np.empty(n, dtype=np.float64)
    out_x = np.empty(n, dtype=np.float64)
    for pool in pools:
        out_w[pool.start : pool.stop] = pool.weight
        out_x[pool.start : pool.stop] = pool.value
    return Regression(weights=out_w, values=out_x)


def regress_radial(
    values: ArrayLike,
    weights: ArrayLike,
    center_index: int,
    direction: Direction,
) -> Regression:
    """Fit two independent monotone arms split at ``center_index``.

    ``[0, center_index)`` is fit with ``direction.complement()`` and
    ``[center_index, n)`` with ``direction``, so ``INCREASING`` gives a valley
    and ``DECREASING`` a peak. The center element belongs to the right arm and
    nothing ties the two arms together at the boundary.
    """
    _check_direction(direction)
    x, w = _as_inputs(values, weights)
    n = x.shape[0]
    if isinstance(center_index, (bool, np.bool_)) or not isinstance(center_index, (int, np.integer)):
        raise CenterIndexError(f"center_index must be an integer, got {center_index!r}")
    if not 0 <= center_index <= n:
        raise CenterIndexError(f"center_index must lie in [0, {n}], got {center_index}")
    center = int(center_index)
    if center == 0:
        return regress(x, w, direction)
    if center == n:
        return regress(x, w, direction.complement())
    left = regress(x[:center], w[:center], direction.complement())
    right = regress(x[center:], w[center:], direction)
    return Regression.concat(left, right)

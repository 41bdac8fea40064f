from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..core.direction import Direction
from ..core.regression import Regression


def is_monotone(values: np.ndarray, direction: Direction, tol: float = 0.0) -> bool:
    diff = np.diff(np.asarray(values, dtype=np.float64))
    if direction is Direction.INCREASING:
        return bool(np.all(diff >= -tol))
    return bool(np.all(diff <= tol))


def pool_ranges(result: Regression) -> List[Tuple[int, int]]:
    """Half-open ranges of consecutive positions carrying identical (value, weight).

    Two adjacent pools that happen to share both value and weight are reported
    as one range.
    """
    n = len(result)
    if n == 0:
        return []
    changed = (np.diff(result.values) != 0) | (np.diff(result.weights) != 0)
    starts = np.concatenate([[0], np.flatnonzero(changed) + 1])
    stops = np.concatenate([starts[1:], [n]])
    return [(int(s), int(e)) for s, e in zip(starts, stops)]


def total_weight(result: Regression) -> float:
    return float(sum(result.weights[s] for s, _ in pool_ranges(result)))


def weighted_sse(values_in: np.ndarray, weights_in: np.ndarray, fitted: np.ndarray) -> float:
    x = np.asarray(values_in, dtype=np.float64)
    w = np.asarray(weights_in, dtype=np.float64)
    return float(np.sum(w * (np.asarray(fitted, dtype=np.float64) - x) ** 2))


def summarize(
    values_in: np.ndarray,
    weights_in: np.ndarray,
    result: Regression,
    direction: Direction,
    center: Optional[int] = None,
) -> Dict[str, Any]:
    ranges = pool_ranges(result)
    out: Dict[str, Any] = {
        "n": len(result),
        "num_pools": len(ranges),
        "input_weight": float(np.sum(weights_in)),
        "pooled_weight": total_weight(result),
        "sse": weighted_sse(values_in, weights_in, result.values),
        "min_value": float(np.min(result.values)),
        "max_value": float(np.max(result.values)),
    }
    if center is None:
        out["monotone"] = is_monotone(result.values, direction)
    else:
        out["left_monotone"] = is_monotone(result.values[:center], direction.complement())
        out["right_monotone"] = is_monotone(result.values[center:], direction)
    return out

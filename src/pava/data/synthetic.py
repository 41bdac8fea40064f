from __future__ import annotations

from typing import Callable, Dict, Tuple

import numpy as np

ShapeFn = Callable[[int, int], float]


def increasing(i: int, n: int) -> float:
    return float(i)


def decreasing(i: int, n: int) -> float:
    return float(n - i)


def valley(i: int, n: int) -> float:
    return float(abs(i - n // 2))


SHAPES: Dict[str, ShapeFn] = {
    "increasing": increasing,
    "decreasing": decreasing,
    "valley": valley,
}


def get_shape(name: str) -> ShapeFn:
    if name not in SHAPES:
        raise ValueError(f"Unknown shape: {name}")
    return SHAPES[name]


def noisy_line(
    fn: ShapeFn,
    n: int = 100,
    slope: float = 0.5,
    noise: float = 10.0,
    seed: int = 123,
) -> Tuple[np.ndarray, np.ndarray]:
    """Sample ``fn(i, n) * slope`` plus uniform noise in ``[-noise, noise)``, with unit weights."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    rng = np.random.default_rng(seed)
    base = np.array([fn(i, n) for i in range(n)], dtype=np.float64)
    values = base * slope + rng.uniform(-noise, noise, size=n)
    weights = np.ones(n, dtype=np.float64)
    return values, weights


def make_shape(name: str, n: int = 100, slope: float = 0.5, noise: float = 10.0, seed: int = 123):
    return noisy_line(get_shape(name), n=n, slope=slope, noise=noise, seed=seed)

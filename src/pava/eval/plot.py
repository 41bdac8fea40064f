from __future__ import annotations

import os
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..utils.io_helpers import ensure_dir


def _extent(values_in: np.ndarray, values_out: np.ndarray) -> Tuple[float, float, float, float]:
    n = max(len(values_in), len(values_out))
    ys = np.concatenate([np.asarray(values_in, dtype=np.float64), np.asarray(values_out, dtype=np.float64)])
    return 0.0, float(ys.min()), float(max(n - 1, 0)), float(ys.max())


def dump_diagram(
    path: str,
    values_in: np.ndarray,
    values_out: np.ndarray,
    margin: float = 5.0,
    title: Optional[str] = None,
) -> str:
    """Scatter the raw observations (black) against the pooled values (red) and save to ``path``."""
    min_x, min_y, max_x, max_y = _extent(values_in, values_out)

    plt.figure(figsize=(6, 4))
    plt.scatter(np.arange(len(values_in)), values_in, s=6, c="black", label="observed")
    plt.scatter(np.arange(len(values_out)), values_out, s=18, c="red", alpha=0.5, label="pooled")
    plt.xlim(min_x - margin, max_x + margin)
    plt.ylim(min_y - margin, max_y + margin)
    plt.xlabel("index")
    plt.ylabel("value")
    if title:
        plt.title(title)
    plt.legend(loc="best")
    plt.tight_layout()
    ensure_dir(os.path.dirname(path))
    plt.savefig(path, dpi=200)
    plt.close()
    return path

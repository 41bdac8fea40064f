from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from ..core.regression import Regression


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def save_metrics(path: str, metrics: Dict[str, Any]) -> None:
    ensure_dir(os.path.dirname(path))
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)


def regression_frame(values_in: np.ndarray, weights_in: np.ndarray, result: Regression) -> pd.DataFrame:
    """One row per input position: observation next to its pooled value and weight."""
    return pd.DataFrame(
        {
            "index": np.arange(len(result)),
            "value": np.asarray(values_in, dtype=np.float64),
            "weight": np.asarray(weights_in, dtype=np.float64),
            "pooled_value": result.values,
            "pooled_weight": result.weights,
        }
    )


def save_regression_csv(
    path: str,
    values_in: np.ndarray,
    weights_in: np.ndarray,
    result: Regression,
    extra: Optional[Dict[str, Any]] = None,
) -> pd.DataFrame:
    df = regression_frame(values_in, weights_in, result)
    for key, val in (extra or {}).items():
        df[key] = val
    ensure_dir(os.path.dirname(path))
    df.to_csv(path, index=False)
    return df

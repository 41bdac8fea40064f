from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Required relation between consecutive pooled values."""

    INCREASING = "increasing"
    DECREASING = "decreasing"

    def complement(self) -> "Direction":
        if self is Direction.INCREASING:
            return Direction.DECREASING
        return Direction.INCREASING

    def violates(self, earlier: float, later: float) -> bool:
        # strict: equal neighbours never merge
        if self is Direction.INCREASING:
            return earlier > later
        return earlier < later

    @classmethod
    def parse(cls, name: str) -> "Direction":
        key = name.strip().lower()
        if key in ("increasing", "inc"):
            return cls.INCREASING
        if key in ("decreasing", "dec"):
            return cls.DECREASING
        raise ValueError(f"Unknown direction: {name}")

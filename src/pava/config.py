from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Optional

from .core.direction import Direction


@dataclass
class DataConfig:
    shape: str = "increasing"
    n: int = 100
    slope: float = 0.5
    noise: float = 10.0
    seed: int = 123


@dataclass
class RegressionConfig:
    direction: str = "increasing"
    center: Optional[int] = None

    def resolve_direction(self) -> Direction:
        return Direction.parse(self.direction)

    @property
    def radial(self) -> bool:
        return self.center is not None


@dataclass
class OutputConfig:
    out_dir: str = "target"
    name: Optional[str] = None
    format: str = "svg"
    margin: float = 5.0
    log_file: Optional[str] = None
    log_level: str = "INFO"


@dataclass
class RunConfig:
    data: DataConfig = field(default_factory=DataConfig)
    regression: RegressionConfig = field(default_factory=RegressionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    extra: Dict[str, Any] = field(default_factory=dict)

    def run_name(self) -> str:
        if self.output.name:
            return self.output.name
        name = f"{self.data.shape}_{self.regression.direction}"
        if self.regression.radial:
            name += f"_c{self.regression.center}"
        return name


def _plain(obj: Any) -> Any:
    if is_dataclass(obj):
        return {f.name: _plain(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, (list, tuple)):
        return [_plain(v) for v in obj]
    if isinstance(obj, dict):
        return {str(k): _plain(v) for k, v in obj.items()}
    return obj


def asdict(cfg: RunConfig) -> Dict[str, Any]:
    """JSON-ready nested dict of a run configuration, stored next to its outputs."""
    return _plain(cfg)

from __future__ import annotations

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

import argparse
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")

from pava.config import RunConfig, asdict
from pava.core.regression import regress, regress_radial
from pava.data.synthetic import SHAPES, make_shape
from pava.eval.metrics import summarize
from pava.eval.plot import dump_diagram
from pava.utils.io_helpers import save_metrics, save_regression_csv
from pava.utils.logging import get_logger, parse_level, setup_logging
from pava.utils.seed import seed_everything


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument("--shape", default="increasing", choices=sorted(SHAPES))
    parser.add_argument("--direction", default="increasing", choices=["increasing", "decreasing"])
    parser.add_argument("--center", type=int, default=None)
    parser.add_argument("--n", type=int, default=100)
    parser.add_argument("--slope", type=float, default=0.5)
    parser.add_argument("--noise", type=float, default=10.0)
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--out_dir", default="target")
    parser.add_argument("--name", default=None)
    parser.add_argument("--format", default="svg", choices=["svg", "png", "pdf"])
    parser.add_argument("--margin", type=float, default=5.0)
    parser.add_argument("--log_file", default=None)
    parser.add_argument("--log_level", default="INFO")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RunConfig:
    cfg = RunConfig()
    cfg.data.shape = args.shape
    cfg.data.n = args.n
    cfg.data.slope = args.slope
    cfg.data.noise = args.noise
    cfg.data.seed = args.seed
    cfg.regression.direction = args.direction
    cfg.regression.center = args.center
    cfg.output.out_dir = args.out_dir
    cfg.output.name = args.name
    cfg.output.format = args.format
    cfg.output.margin = args.margin
    cfg.output.log_file = args.log_file
    cfg.output.log_level = args.log_level
    return cfg


def run(cfg: RunConfig) -> dict:
    setup_logging(level=parse_level(cfg.output.log_level), log_file=cfg.output.log_file)
    logger = get_logger("run")
    seed_everything(cfg.data.seed)

    values, weights = make_shape(
        cfg.data.shape, n=cfg.data.n, slope=cfg.data.slope, noise=cfg.data.noise, seed=cfg.data.seed
    )
    direction = cfg.regression.resolve_direction()
    if cfg.regression.radial:
        logger.info("radial fit: shape=%s direction=%s center=%s", cfg.data.shape, direction.value, cfg.regression.center)
        result = regress_radial(values, weights, cfg.regression.center, direction)
    else:
        logger.info("isotonic fit: shape=%s direction=%s", cfg.data.shape, direction.value)
        result = regress(values, weights, direction)

    metrics = summarize(values, weights, result, direction, center=cfg.regression.center)
    logger.info("n %d pools %d sse %.4f", metrics["n"], metrics["num_pools"], metrics["sse"])

    name = cfg.run_name()
    out_dir = cfg.output.out_dir
    diagram_path = dump_diagram(
        os.path.join(out_dir, f"_{name}.{cfg.output.format}"),
        values,
        result.values,
        margin=cfg.output.margin,
        title=name,
    )
    save_regression_csv(os.path.join(out_dir, f"{name}.csv"), values, weights, result)
    save_metrics(os.path.join(out_dir, f"{name}_metrics.json"), {"config": asdict(cfg), "metrics": metrics})
    logger.info("wrote %s", diagram_path)
    return metrics


def main(argv: Optional[List[str]] = None) -> None:
    run(build_config(parse_args(argv)))


if __name__ == "__main__":
    main()

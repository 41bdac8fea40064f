from __future__ import annotations

import logging
import os
from typing import Optional

PROJECT_LOGGER = "pava"


def _formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    name: str = PROJECT_LOGGER,
) -> logging.Logger:
    """Attach handlers to the project logger so every ``pava.*`` module reports through it.

    Repeated calls only adjust the level; handlers are added once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(_formatter())
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(suffix: str) -> logging.Logger:
    return logging.getLogger(f"{PROJECT_LOGGER}.{suffix}")


def parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level

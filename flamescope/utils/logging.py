from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "FLAMESCOPE_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Pick the effective level, letting ``FLAMESCOPE_LOG_LEVEL`` win when set."""
    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        level = env_level
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logger(
    name: str = "flamescope",
    level: Union[int, str] = logging.INFO,
    logfile: Optional[str] = None,
    propagate: bool = False,
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(resolve_level(level))
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = propagate
    return logger

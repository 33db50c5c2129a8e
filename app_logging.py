"""Logging configuration helpers."""

import logging

from config import LOG_LEVEL


def resolve_level(name: str) -> int:
    """Map a LOG_LEVEL value such as "debug" to a logging level, INFO if unknown."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging() -> None:
    """Configure the nutrition_calculator logger with a single stream handler."""
    logger = logging.getLogger("nutrition_calculator")
    logger.setLevel(resolve_level(LOG_LEVEL))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
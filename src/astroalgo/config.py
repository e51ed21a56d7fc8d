"""Configuration: logging level and CLI defaults from the environment."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_DECIMALS = 6


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s %r (must be integer); using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s %d out of range (must be >= %d); using %d", name, value, minimum, default)
        return default
    return value


def get_log_level() -> int:
    """Return the logging level (ASTROALGO_LOG_LEVEL env var or WARNING).

    Accepts level names (``debug``, ``INFO``...) or numeric levels.
    """
    raw = os.environ.get("ASTROALGO_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    logger.warning("Unknown log level %r; using %s", raw, DEFAULT_LOG_LEVEL)
    return logging.WARNING


def get_max_iterations() -> int:
    """Return the iteration budget used by the CLI (ASTROALGO_MAX_ITERATIONS or 50)."""
    return _env_int("ASTROALGO_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS, 1)


def get_decimals() -> int:
    """Return the number of decimals printed by the CLI (ASTROALGO_DECIMALS or 6)."""
    return _env_int("ASTROALGO_DECIMALS", DEFAULT_DECIMALS, 0)

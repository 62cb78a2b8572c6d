"""Application defaults and environment configuration."""

from __future__ import annotations

import logging
import os
from datetime import date

from .loan import LoanParameters

# Logging configuration
LOG_LEVEL = os.environ.get("PRECLOSURE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """Read a positive integer setting, falling back to default when unusable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%d, using %d", name, value, default)
        return default
    return value


# Amortization table rows visible without scrolling
SCHEDULE_PAGE_SIZE = env_int("PRECLOSURE_SCHEDULE_PAGE_SIZE", 36)

# Form defaults
DEFAULT_PARAMETERS = LoanParameters(
    principal=800000.0,
    annual_rate_percent=12.0,
    tenure_months=36,
    start_date=date(2024, 4, 1),
    evaluation_date=date(2025, 4, 1),
    preclosure_charge_percent=4.0,
    investment_return_percent=8.0,
)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the application entry point.

    Args:
        level: Level name such as "DEBUG". Defaults to PRECLOSURE_LOG_LEVEL.
    """
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )

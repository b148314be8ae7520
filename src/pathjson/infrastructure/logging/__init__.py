"""Logging infrastructure."""

from pathjson.infrastructure.logging.setup import (
    IgnoreLogChangeDetectedFilter,
    setup_logging,
)

__all__ = [
    "IgnoreLogChangeDetectedFilter",
    "setup_logging",
]

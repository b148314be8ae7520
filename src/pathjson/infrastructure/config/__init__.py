"""Configuration loading for pathjson."""

from pathjson.infrastructure.config.settings import (
    Config,
    get_config,
    refresh_config,
)

__all__ = ["Config", "get_config", "refresh_config"]

"""Application settings loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

import structlog
from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathjson.domain.types import MAX_PAYLOAD_CHARS

logger = structlog.get_logger(__name__)

ENV_FILE_ENV_VAR = "PATHJSON_ENV_FILE"
_env_files_loaded = [False]


def _load_env_files() -> None:
    """Load PATHJSON_ENV_FILE, then ./.env, once per process. Set variables win."""
    if _env_files_loaded[0]:
        return

    candidates = [Path.cwd() / ".env"]
    env_override = os.environ.get(ENV_FILE_ENV_VAR)
    if env_override:
        candidates.insert(0, Path(env_override).expanduser())

    loaded_paths = [str(path) for path in candidates if path.is_file()]
    for path in loaded_paths:
        load_dotenv(dotenv_path=path, override=False)

    if loaded_paths:
        logger.info(
            "Environment configuration loaded",
            operation="load_env",
            status="success",
            loaded_paths=loaded_paths,
        )

    _env_files_loaded[0] = True


class Config(BaseSettings):
    """Service configuration loaded from ``PATHJSON_*`` environment variables.

    Attributes:
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on (``PATHJSON_PORT`` or ``PORT``).
        environment: Deployment environment; development enables auto-reload.
        log_level: Root log level name.
        log_file_path: Optional rotating log file.
        log_json: Render log lines as JSON instead of console key/values.
        max_payload_chars: Largest decoded document the service returns.
        cors_allow_origins: Origins allowed by the CORS middleware.

    Example:
        >>> config = Config()
        >>> config.max_payload_chars
        64000
    """

    model_config = SettingsConfigDict(
        env_prefix="PATHJSON_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    host: str = "0.0.0.0"
    port: int = Field(
        default=8001,
        validation_alias=AliasChoices("PATHJSON_PORT", "PORT"),
    )
    environment: Literal["development", "production"] = "development"
    log_level: str = "INFO"
    log_file_path: str | None = None
    log_json: bool = False
    max_payload_chars: int = Field(default=MAX_PAYLOAD_CHARS, gt=0)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def is_development(self) -> bool:
        return self.environment != "production"


_config_instance: list[Config | None] = [None]


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    if _config_instance[0] is None:
        _load_env_files()
        _config_instance[0] = Config()
    return _config_instance[0]


def refresh_config() -> Config:
    """Rebuild the configuration to pick up environment variable changes."""
    _config_instance[0] = None
    return get_config()

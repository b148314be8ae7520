import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog


class IgnoreLogChangeDetectedFilter(logging.Filter):
    def filter(self, record: logging.LogRecord):
        return "Detected file change in" not in record.getMessage()


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def setup_logging(
    level: str | None = None,
    log_file_path: str | None = None,
    json_output: bool | None = None,
) -> None:
    """
    Configure stdlib logging and structlog for the service.

    Arguments override the environment variables below.

    Environment variables:
        LOG_LEVEL: Log level (default: INFO)
        LOG_FILE_PATH: Path to a rotating log file (default: console only)
        LOG_MAX_SIZE: Max size in MB before rotating (default: 10MB)
        LOG_BACKUP_COUNT: Number of backup files to keep (default: 5)
        LOG_JSON: Render events as JSON lines when "1"/"true"

    Events from structlog and from plain ``logging`` loggers (uvicorn,
    fastapi) go through the same handlers and renderer.
    """
    log_level_str = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    if json_output is None:
        json_output = os.environ.get("LOG_JSON", "").lower() in {"1", "true", "yes"}

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    file_path = log_file_path or os.environ.get("LOG_FILE_PATH")
    if file_path:
        resolved_path = Path(file_path).expanduser().resolve()
        resolved_path.parent.mkdir(parents=True, exist_ok=True)

        # Get max log file size (default: 10MB)
        try:
            max_mb = int(os.environ.get("LOG_MAX_SIZE", 10))
            max_bytes = max_mb * 1024 * 1024
        except (TypeError, ValueError):
            max_bytes = 10 * 1024 * 1024

        try:
            backup_count = int(os.environ.get("LOG_BACKUP_COUNT", 5))
        except ValueError:
            backup_count = 5

        handlers.append(
            RotatingFileHandler(
                resolved_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            ),
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(IgnoreLogChangeDetectedFilter())

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).debug(
        "Logging configured",
        level=log_level_str,
        file=file_path,
        json=json_output,
    )

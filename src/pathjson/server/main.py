"""Run the pathjson API with uvicorn."""

from __future__ import annotations

import structlog
import uvicorn

from pathjson.infrastructure.config import get_config

logger = structlog.get_logger(__name__)


def run_server(
    host: str | None = None,
    port: int | None = None,
    reload: bool | None = None,
) -> None:
    """Start uvicorn serving the application factory.

    Unset arguments fall back to the configuration; reload defaults to on in
    development.
    """
    config = get_config()
    host = host or config.host
    port = port or config.port
    reload = config.is_development if reload is None else reload

    logger.info(
        "Starting pathjson API",
        operation="run_server",
        host=host,
        port=port,
        reload=reload,
    )

    uvicorn.run(
        "pathjson.server.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        reload_excludes=["**/logs/*", "**/__pycache__/*", "**/*.pyc"] if reload else None,
        log_config=None,
    )


if __name__ == "__main__":
    run_server()

"""FastAPI application factory wiring together middleware and routers."""

from __future__ import annotations

import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from pathjson import __version__
from pathjson.infrastructure.config import Config, get_config
from pathjson.infrastructure.logging import setup_logging
from pathjson.server.responses import error_response
from pathjson.server.routes.decode import router as decode_router
from pathjson.server.routes.system import router as system_router

logger = structlog.get_logger(__name__)


async def bind_request_context(request: Request, call_next):
    """Bind request identifiers to every log event emitted while handling it."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
        method=request.method,
        path=request.url.path,
    )
    try:
        response = await call_next(request)
        logger.info(
            "Request handled",
            operation="http_request",
            status_code=response.status_code,
        )
        return response
    finally:
        structlog.contextvars.clear_contextvars()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Shape routing errors (404, 405) like every other error body."""
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    response = error_response(message, exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", operation="http_request", error=str(exc))
    return error_response("Internal server error", 500)


def create_app(config: Config | None = None) -> FastAPI:
    """Build the pathjson application.

    Args:
        config: Settings to use; defaults to the process-wide configuration.

    Returns:
        Configured FastAPI application. The catch-all decode router is
        registered last so the landing page and health routes take priority.
    """
    config = config or get_config()
    setup_logging(
        level=config.log_level,
        log_file_path=config.log_file_path,
        json_output=config.log_json,
    )

    app = FastAPI(
        title="pathjson",
        description="Recover JSON documents embedded, raw or encoded, in URL paths",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.middleware("http")(bind_request_context)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(system_router)
    app.include_router(decode_router)

    logger.info(
        "Application created",
        operation="create_app",
        environment=config.environment,
        max_payload_chars=config.max_payload_chars,
    )
    return app


__all__ = ["create_app"]

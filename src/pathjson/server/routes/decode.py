"""Catch-all route decoding the JSON document embedded in the request path."""

from __future__ import annotations

from fastapi import APIRouter, Request
from returns.pipeline import is_successful

from pathjson.core.decoder import decode_path
from pathjson.domain.models import ErrorResponse
from pathjson.server.responses import error_response, json_response, preflight_response

router = APIRouter(tags=["decode"])


def raw_request_path(request: Request) -> str:
    """Return the request path as sent by the client, escapes intact."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    path, _, _ = raw_path.partition(b"?")
    return path.decode("utf-8", errors="replace")


@router.api_route(
    "/{full_path:path}",
    methods=["GET", "HEAD"],
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
    },
)
async def decode_json_from_path(request: Request, full_path: str):
    """Return the JSON object or array embedded, raw or encoded, in the path."""
    config = request.app.state.config
    result = decode_path(raw_request_path(request), config.max_payload_chars)
    if is_successful(result):
        return json_response(result.unwrap().value)
    failure = result.failure()
    return error_response(failure.message, failure.status_code)


@router.options("/{full_path:path}", include_in_schema=False)
async def preflight(full_path: str):
    """Answer bare OPTIONS requests with the CORS headers."""
    return preflight_response()


__all__ = ["raw_request_path", "router"]

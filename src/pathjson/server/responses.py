"""Response helpers with the service's caching and CORS headers."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse, Response

from pathjson.core.validator import dump_document

JSON_CACHE_CONTROL = "public, immutable, max-age=86400, s-maxage=86400"
PAGE_CACHE_CONTROL = "public, max-age=3600, s-maxage=86400"

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, HEAD, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with a two-space indent."""

    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return dump_document(content).encode("utf-8")


def json_response(body: Any, status_code: int = 200) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        content=body,
        status_code=status_code,
        headers={"cache-control": JSON_CACHE_CONTROL},
    )


def error_response(message: str, status_code: int) -> PrettyJSONResponse:
    return json_response({"error": message}, status_code=status_code)


def preflight_response() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


__all__ = [
    "CORS_HEADERS",
    "JSON_CACHE_CONTROL",
    "PAGE_CACHE_CONTROL",
    "PrettyJSONResponse",
    "error_response",
    "json_response",
    "preflight_response",
]

"""System routes: landing page and health check."""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from importlib import resources

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from pathjson import __version__
from pathjson.domain.models import HealthResponse
from pathjson.server.responses import PAGE_CACHE_CONTROL

router = APIRouter(tags=["system"])


@lru_cache(maxsize=1)
def load_landing_page() -> str:
    """Return the bundled landing page HTML."""
    page = resources.files("pathjson.server") / "static" / "index.html"
    return page.read_text(encoding="utf-8")


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
@router.api_route("/index.html", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def landing_page():
    """Serve the landing page describing the supported encodings."""
    return HTMLResponse(
        content=load_landing_page(),
        headers={"cache-control": PAGE_CACHE_CONTROL},
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Simple health check endpoint for containers and monitoring."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        service="pathjson",
        version=__version__,
    )


__all__ = ["load_landing_page", "router"]

"""FastAPI application entrypoint.

Provides the main FastAPI app with a ``/health`` endpoint, request-ID
middleware, a ``/paths`` echo route, and the path firewall installed as the
outermost layer so that no routing happens on an unchecked path.
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response

from http_firewall.core.config import Settings
from http_firewall.models.schemas import HealthResponse, PathEchoResponse
from http_firewall.security.middleware import FirewallMiddleware

logger = logging.getLogger(__name__)

settings = Settings()

_start_time = time.monotonic()

app = FastAPI(
    title=settings.SERVICE_NAME,
    version=settings.SERVICE_VERSION,
)


# ── Middleware chain ────────────────────────────────────────────────────
# Order: Firewall → RequestID → [handler]
# Starlette add_middleware prepends, so LAST added = OUTERMOST.


@app.middleware("http")
async def request_id_middleware(request: Request, call_next) -> Response:
    """Assign or preserve a unique request ID on every request."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


if settings.FIREWALL_ENABLED:
    app.add_middleware(
        FirewallMiddleware,
        rejection_status_code=settings.REJECTION_STATUS_CODE,
    )
else:
    logger.warning("HTTP_FIREWALL_FIREWALL_ENABLED=false: request paths are not checked")


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return service health with name, version, status, and uptime."""
    return HealthResponse(
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        status="healthy",
        uptime_seconds=round(time.monotonic() - _start_time, 2),
    )


@app.get("/paths/{rest:path}", response_model=PathEchoResponse)
async def echo_path(request: Request, rest: str) -> PathEchoResponse:
    """Report the path routing matched and the raw path the client sent."""
    return PathEchoResponse(
        path=request.scope["path"],
        raw_path=request.scope.get("raw_path", b"").decode("latin-1"),
    )

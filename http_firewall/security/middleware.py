"""FirewallMiddleware: runs the path firewall in front of an ASGI app.

Implemented as a plain ASGI middleware rather than ``BaseHTTPMiddleware``:
the downstream app has to receive a scope whose ``path`` is the sanitized
route path, and ``BaseHTTPMiddleware`` always forwards the scope it was
called with.  WebSocket handshakes are checked too.

Downstream apps get a copy of the scope; the scope handed to this
middleware is never changed.
"""

from __future__ import annotations

import uuid
from typing import Any

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocketClose

from http_firewall.core.errors import RequestRejectedError, StructuredErrorResponse
from http_firewall.firewall.default import DefaultHttpFirewall, HttpFirewall

# Scope types carrying a request path
_GUARDED_SCOPES: set[str] = {"http", "websocket"}

# RFC 6455 policy violation
_WS_POLICY_VIOLATION: int = 1008


class AsgiRequest:
    """Exposes an ASGI connection scope through the ``RequestPaths`` interface.

    ASGI has no separate extra-path-info field; the whole decoded path is
    the route path.  ``request_id`` is the ``X-Request-ID`` the client sent,
    or a fresh UUID4 when it sent none.
    """

    def __init__(self, scope: Scope) -> None:
        self.scope = scope
        self.request_id = self.headers.get("X-Request-ID") or str(uuid.uuid4())

    @property
    def route_path(self) -> str | None:
        return self.scope["path"]

    @property
    def extra_path_info(self) -> str | None:
        return None

    @property
    def headers(self) -> Headers:
        return Headers(scope=self.scope)


class FirewallMiddleware:
    """Rejects un-normalized paths and forwards sanitized ones."""

    def __init__(
        self,
        app: ASGIApp,
        firewall: HttpFirewall | None = None,
        rejection_status_code: int = 400,
    ) -> None:
        self.app = app
        self.firewall = firewall or DefaultHttpFirewall()
        self.rejection_status_code = rejection_status_code

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in _GUARDED_SCOPES:
            await self.app(scope, receive, send)
            return

        request = AsgiRequest(scope)
        try:
            firewalled = self.firewall.get_firewalled_request(request)
        except RequestRejectedError:
            await self._reject(scope, receive, send, request.request_id)
            return

        downstream_scope = {**scope, "path": firewalled.route_path}
        await self.app(downstream_scope, receive, self.firewall.get_firewalled_response(send))

    async def _reject(self, scope: Scope, receive: Receive, send: Send, request_id: str) -> None:
        """Refuse the connection without calling the downstream app."""
        if scope["type"] == "websocket":
            await WebSocketClose(code=_WS_POLICY_VIOLATION)(scope, receive, send)
            return

        response = _rejected(self.rejection_status_code, request_id)
        await response(scope, receive, send)


def _rejected(status_code: int, request_id: str) -> JSONResponse:
    """Return a structured 4xx with no path details leaked."""
    body: dict[str, Any] = StructuredErrorResponse(
        error="Request rejected",
        code="REQUEST_REJECTED",
        request_id=request_id,
    ).model_dump()
    return JSONResponse(
        status_code=status_code,
        content=body,
        headers={"X-Request-ID": request_id},
    )

"""Default HTTP firewall: strip path parameters, then reject traversal.

Path parameters are removed from the route path and extra path info of
every request, and any request whose stripped paths still contain ``.`` or
``..`` segments is refused before routing runs.  Most servers normalize
paths before matching routes, but nothing guarantees it, and a segment such
as ``..;x`` only becomes a traversal once its parameter is removed.  That is
why the check always runs on the stripped values.

Applications served behind this firewall should not rely on paths that
legitimately contain ``;``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from http_firewall.core.errors import RequestRejectedError
from http_firewall.firewall.normalization import is_normalized
from http_firewall.firewall.request import FirewalledRequest, RequestPaths
from http_firewall.security.audit import SecuritySeverity, log_security_event

_ResponseT = TypeVar("_ResponseT")


class HttpFirewall(Protocol):
    """Interface a pipeline uses to guard requests and responses."""

    def get_firewalled_request(self, request: RequestPaths) -> FirewalledRequest:
        """Wrap *request* for downstream use.

        Raises:
            RequestRejectedError: If the request must not be processed.
        """
        ...

    def get_firewalled_response(self, response: _ResponseT) -> _ResponseT: ...


class DefaultHttpFirewall:
    """Strips path parameters and refuses un-normalized paths.

    A ``request_id`` attribute on the request, when present, is attached to
    the security event logged for a rejection.
    """

    def get_firewalled_request(self, request: RequestPaths) -> FirewalledRequest:
        firewalled = FirewalledRequest(request)
        route_path = firewalled.route_path
        extra_path_info = firewalled.extra_path_info

        if not is_normalized(route_path) or not is_normalized(extra_path_info):
            path = f"{route_path or ''}{extra_path_info or ''}"
            log_security_event(
                "path_rejected",
                SecuritySeverity.HIGH,
                f"un-normalized path {path!r}",
                request_id=getattr(request, "request_id", ""),
            )
            raise RequestRejectedError(f"Un-normalized paths are not supported: {path}")

        return firewalled

    def get_firewalled_response(self, response: _ResponseT) -> _ResponseT:
        """Responses pass through untouched."""
        return response

"""Structured errors for the http-firewall service.

Custom exception hierarchy plus the JSON body returned to clients when a
request is refused.  Rejections are terminal: nothing in the gate retries
or recovers from them.
"""

from pydantic import BaseModel


class HttpFirewallError(Exception):
    """Base exception for all http-firewall errors."""


class RequestRejectedError(HttpFirewallError):
    """Raised when a request fails the firewall and must not be processed.

    The caller decides which 4xx status to surface; ``reason`` is meant for
    logs and diagnostics.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class StructuredErrorResponse(BaseModel):
    """Structured error response.

    Returns ``{"error": str, "code": str, "request_id": str}``, no stack traces.
    """

    error: str
    code: str
    request_id: str

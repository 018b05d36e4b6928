"""Security event logging.

Every request the firewall refuses is reported on the
``http_firewall.security`` logger as a single key=value line so that log
pipelines can filter on ``SECURITY_EVENT``.
"""

from __future__ import annotations

import enum
import logging

_security_logger = logging.getLogger("http_firewall.security")


# ── SecuritySeverity ────────────────────────────────────────────────────


class SecuritySeverity(enum.Enum):
    """Severity levels for security events."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# ── Security event logging ──────────────────────────────────────────────


def log_security_event(
    event_type: str,
    severity: SecuritySeverity,
    detail: str,
    request_id: str = "",
) -> None:
    """Log a security event with severity.

    CRITICAL severity logs at ERROR level; others at WARNING.
    """
    msg = f"SECURITY_EVENT event={event_type} severity={severity.value} detail='{detail}' request_id={request_id}"
    if severity == SecuritySeverity.CRITICAL:
        _security_logger.error(msg)
    else:
        _security_logger.warning(msg)

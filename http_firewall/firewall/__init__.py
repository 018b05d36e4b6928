"""Request-path firewall.

Strips ``;`` path parameters from request paths and rejects requests whose
paths still contain ``.`` or ``..`` segments, before any routing or
authorization decision is made.
"""

from http_firewall.firewall.default import DefaultHttpFirewall, HttpFirewall
from http_firewall.firewall.normalization import is_normalized
from http_firewall.firewall.request import (
    FirewalledRequest,
    RequestPaths,
    strip_path_parameters,
)

__all__ = [
    "DefaultHttpFirewall",
    "FirewalledRequest",
    "HttpFirewall",
    "RequestPaths",
    "is_normalized",
    "strip_path_parameters",
]

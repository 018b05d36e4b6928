"""Path-parameter stripping and the firewalled request wrapper.

Servers disagree about what to do with ``;``-suffixed path segments
(``/account;jsessionid=123/info``).  Some hand them to routing, some drop
them, so they can be used to sneak past path-based security rules.  The
wrapper defined here presents a request whose route path and extra path
info have every such suffix removed, while everything else about the
request is read straight from the original object.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

_logger = logging.getLogger("http_firewall.firewall")


@runtime_checkable
class RequestPaths(Protocol):
    """The slice of a request the firewall needs to read.

    Both values are already percent-decoded by the hosting server;
    ``extra_path_info`` is ``None`` when there is no path beyond the route.
    """

    @property
    def route_path(self) -> str | None: ...

    @property
    def extra_path_info(self) -> str | None: ...


def strip_path_parameters(path: str | None) -> str | None:
    """Remove the ``;...`` suffix from every ``/``-delimited segment of *path*.

    Segment positions are preserved: ``/a;x/b`` becomes ``/a/b`` and a segment
    that is only a parameter (``/;x/b``) becomes empty rather than being
    dropped.  Paths without ``;`` come back unchanged.
    """
    if path is None or ";" not in path:
        return path

    segments = path.split("/")
    return "/".join(segment.split(";", 1)[0] for segment in segments)


class FirewalledRequest:
    """Request wrapper exposing parameter-stripped path components.

    Only ``route_path`` and ``extra_path_info`` are answered by the wrapper;
    every other attribute is looked up on the wrapped request.  The wrapped
    request is never modified.
    """

    def __init__(self, request: RequestPaths) -> None:
        self._request = request
        self._stripping = True
        self._route_path = strip_path_parameters(request.route_path)
        self._extra_path_info = strip_path_parameters(request.extra_path_info)

        if self._route_path != request.route_path or self._extra_path_info != request.extra_path_info:
            _logger.debug(
                "Stripped path parameters route_path=%r extra_path_info=%r",
                self._route_path,
                self._extra_path_info,
            )

    @property
    def request(self) -> RequestPaths:
        """The original, unwrapped request."""
        return self._request

    @property
    def route_path(self) -> str | None:
        if self._stripping:
            return self._route_path
        return self._request.route_path

    @property
    def extra_path_info(self) -> str | None:
        if self._stripping:
            return self._extra_path_info
        return self._request.extra_path_info

    def reset(self) -> None:
        """Stop presenting stripped paths.

        Called when the request leaves the secured part of the pipeline
        (e.g. an internal forward), so later stages see the same paths the
        server resolved.
        """
        self._stripping = False

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not defined on the wrapper itself.
        if name.startswith("__") or name in ("_request", "_stripping", "_route_path", "_extra_path_info"):
            raise AttributeError(name)
        return getattr(self._request, name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(route_path={self.route_path!r}, "
            f"extra_path_info={self.extra_path_info!r})"
        )

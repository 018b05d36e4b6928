"""Response models for the http-firewall service endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for GET /health."""

    service: str
    version: str
    status: str
    uptime_seconds: float


class PathEchoResponse(BaseModel):
    """Response model for GET /paths/{rest}: what routing actually saw."""

    path: str
    raw_path: str

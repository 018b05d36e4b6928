"""Settings for the http-firewall service.

All settings are loaded from environment variables with the HTTP_FIREWALL_
prefix.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """HTTP firewall configuration.

    All fields can be overridden by environment variables prefixed with
    ``HTTP_FIREWALL_``.  For example, ``HTTP_FIREWALL_PORT=9999`` overrides
    the default port.
    """

    # ── Service identity ────────────────────────────────────────────
    SERVICE_NAME: str = "http-firewall"
    SERVICE_VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8090

    # ── Firewall ────────────────────────────────────────────────────
    FIREWALL_ENABLED: bool = True  # Install the path gate in front of routing
    REJECTION_STATUS_CODE: int = Field(default=400, ge=400, le=499)

    model_config = {
        "env_prefix": "HTTP_FIREWALL_",
    }

"""Tests for the FastAPI app, /health, and the installed firewall.

Verifies that:
- FastAPI app exists and is importable
- GET /health returns service metadata
- Every response carries X-Request-ID
- The firewall sits in front of routing
"""

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def app():
    """Import and return the FastAPI app."""
    from http_firewall.main import app

    return app


@pytest.fixture
async def client(app):
    """Create an async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac


class TestHealthEndpoint:
    """/health returns metadata."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client):
        response = await client.get("/health")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_json(self, client):
        response = await client.get("/health")
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_health_contains_service_name(self, client):
        response = await client.get("/health")
        assert response.json()["service"] == "http-firewall"

    @pytest.mark.asyncio
    async def test_health_contains_version(self, client):
        response = await client.get("/health")
        assert response.json()["version"] == "0.1.0"

    @pytest.mark.asyncio
    async def test_health_contains_status(self, client):
        response = await client.get("/health")
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_health_contains_uptime(self, client):
        response = await client.get("/health")
        data = response.json()
        assert isinstance(data["uptime_seconds"], (int, float))
        assert data["uptime_seconds"] >= 0


class TestAppImport:
    """The app module builds a FastAPI instance with the firewall installed."""

    def test_app_is_fastapi_instance(self):
        from fastapi import FastAPI

        from http_firewall.main import app

        assert isinstance(app, FastAPI)

    def test_firewall_middleware_installed(self):
        from http_firewall.main import app
        from http_firewall.security.middleware import FirewallMiddleware

        assert any(m.cls is FirewallMiddleware for m in app.user_middleware)

    def test_firewall_is_outermost(self):
        from http_firewall.main import app
        from http_firewall.security.middleware import FirewallMiddleware

        assert app.user_middleware[0].cls is FirewallMiddleware


class TestRequestID:
    """Every routed response includes X-Request-ID."""

    @pytest.mark.asyncio
    async def test_health_has_request_id(self, client):
        response = await client.get("/health")
        assert len(response.headers["x-request-id"]) == 36  # UUID v4 format

    @pytest.mark.asyncio
    async def test_request_ids_are_unique(self, client):
        r1 = await client.get("/health")
        r2 = await client.get("/health")
        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_client_request_id_preserved(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "client-req-999"})
        assert response.headers["x-request-id"] == "client-req-999"


class TestPathEcho:
    """/paths shows what routing saw after the firewall."""

    @pytest.mark.asyncio
    async def test_plain_path(self, client):
        response = await client.get("/paths/account/info")
        assert response.status_code == 200
        assert response.json() == {"path": "/paths/account/info", "raw_path": "/paths/account/info"}

    @pytest.mark.asyncio
    async def test_session_parameter_stripped_raw_path_kept(self, client):
        response = await client.get("/paths/account;jsessionid=123/info")
        assert response.status_code == 200
        assert response.json() == {
            "path": "/paths/account/info",
            "raw_path": "/paths/account;jsessionid=123/info",
        }

    @pytest.mark.asyncio
    async def test_traversal_rejected_before_routing(self, client):
        response = await client.get("/paths/a/..;/b", headers={"X-Request-ID": "req-7"})
        assert response.status_code == 400
        assert response.json() == {
            "error": "Request rejected",
            "code": "REQUEST_REJECTED",
            "request_id": "req-7",
        }

    @pytest.mark.asyncio
    async def test_rejected_request_gets_request_id(self, client):
        response = await client.get("/paths/a/..;/b")
        assert response.status_code == 400
        rid = response.headers["x-request-id"]
        assert len(rid) == 36  # UUID v4 format
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_encoded_traversal_rejected(self, client):
        response = await client.get("/paths/a/%2E%2E/b")
        assert response.status_code == 400

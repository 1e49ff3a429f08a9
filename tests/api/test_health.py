"""
tests/api/test_health.py

Smoke tests for the /health endpoint: the app starts, the route is
reachable, and the version comes from config.
"""

from fastapi.testclient import TestClient

from app.core.config import settings


class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_body(self, client: TestClient) -> None:
        body = client.get("/health").json()
        assert body == {"status": "ok", "version": settings.app_version}

    def test_health_content_type_is_json(self, client: TestClient) -> None:
        response = client.get("/health")
        assert "application/json" in response.headers["content-type"]

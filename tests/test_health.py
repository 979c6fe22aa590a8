"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from campdesk.interfaces.api.resources.health import HealthResource


def _client(readiness_check=None) -> TestClient:
    app = App()
    health = HealthResource(readiness_check)
    app.add_route("/api/health", health)
    app.add_route("/api/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client()


def test_health_liveness(client: TestClient) -> None:
    """GET /api/health returns 200."""
    result = client.simulate_get("/api/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /api/health/ready returns 200."""
    result = client.simulate_get("/api/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_database_down() -> None:
    """Failing readiness check returns 503."""

    async def _down() -> bool:
        return False

    result = _client(_down).simulate_get("/api/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"

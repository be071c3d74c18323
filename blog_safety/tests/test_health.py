"""Unit tests for health endpoint."""
from fastapi.testclient import TestClient

from ..api.routes.health import read_health
from ..main import app


def test_health_endpoint_returns_ok() -> None:
    """Health endpoint should respond with service status."""
    payload = read_health()

    assert payload == {"status": "ok", "service": "Blog Safety Service"}


def test_health_route_is_mounted_under_api_prefix() -> None:
    """The probe is served below the configured API prefix."""
    response = TestClient(app).get("/api/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"

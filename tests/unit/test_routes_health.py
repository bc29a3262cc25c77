"""
Unit tests for api/routes/health.py — health endpoint.
"""
import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.qa_export import __version__


class TestHealthCheck:
    """Test GET /health."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_health_returns_200(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert "timestamp" in data
        assert isinstance(data["timestamp"], float)

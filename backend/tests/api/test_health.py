"""Tests for health check endpoints."""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from api import app
from shared.config import Settings


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_health_response_structure(self):
        """Health response should have correct structure."""
        response = client.get("/api/health")
        data = response.json()
        assert set(data.keys()) == {"status", "version"}

    @patch("api.routes.health.get_settings")
    def test_readiness_when_configured(self, mock_settings):
        """Readiness should report ready when database and auth are configured."""
        mock_settings.return_value = Settings(
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="service-key",
            jwt_secret="secret",
            google_client_id="client-id",
        )
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "database": "configured",
            "auth": "configured",
        }

    @patch("api.routes.health.get_settings")
    def test_readiness_when_auth_missing(self, mock_settings):
        """Readiness should flag a missing session secret."""
        mock_settings.return_value = Settings(
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="service-key",
            jwt_secret="",
            google_client_id="client-id",
        )
        data = client.get("/api/ready").json()
        assert data["status"] == "not_ready"
        assert data["auth"] == "missing"

    def test_readiness_response_structure(self):
        """Readiness response should have correct structure."""
        response = client.get("/api/ready")
        data = response.json()
        assert set(data.keys()) == {"status", "database", "auth"}

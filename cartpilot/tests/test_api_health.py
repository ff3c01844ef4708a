"""Tests for health check API endpoints."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient


class TestHealthzEndpoint:
    """Tests for GET /healthz endpoint (liveness probe)."""

    def test_healthz_returns_ok(self, client: TestClient):
        """Healthz endpoint should return status ok."""
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestHealthEndpoint:
    """Tests for GET /health endpoint (basket storage check)."""

    def test_health_healthy_returns_200(self, client: TestClient):
        """Health endpoint should return 200 when the storage answers."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["basket_storage"]["status"] == "healthy"

    def test_health_includes_timestamp(self, client: TestClient):
        """Health response should include ISO timestamp."""
        data = client.get("/health").json()
        assert "T" in data["timestamp"]


class TestHealthStorageFailure:
    @pytest.fixture
    def kv_store(self):
        failing = MagicMock()
        failing.ping.side_effect = ConnectionError("Redis down")
        return failing

    def test_storage_failure_returns_503(self, client: TestClient):
        """Health endpoint should return 503 when the storage is unreachable."""
        response = client.get("/health")
        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["checks"]["basket_storage"]["status"] == "unhealthy"
        assert "Redis down" in data["checks"]["basket_storage"]["message"]

    def test_liveness_unaffected(self, client: TestClient):
        assert client.get("/healthz").status_code == 200

"""
Tests for health and readiness probes.
"""

from unittest.mock import patch


class TestHealthRouter:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "org-service"

    def test_ready_when_database_answers(self, client):
        response = client.get("/api/v1/ready")

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": "healthy"}

    @patch("app.routers.health_router.check_db_connection", return_value=False)
    def test_not_ready_without_database(self, mock_check, client):
        response = client.get("/api/v1/ready")

        assert response.status_code == 503
        assert response.json()["ready"] is False

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_request_id_echoed(self, client):
        response = client.get("/api/v1/health", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

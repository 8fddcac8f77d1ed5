from fastapi.testclient import TestClient

from timetrack_admin.main import app
from timetrack_admin.services.department_service import DepartmentService


class TestServiceEndpoints:
    """Tests for health and root endpoints"""

    def test_health_check(self, client):
        """Health endpoint reports status and version"""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "version" in response.json()

    def test_root(self, client):
        """Root endpoint returns the service banner"""
        response = client.get("/")

        assert response.status_code == 200
        assert "version" in response.json()


class TestErrorFormat:
    """Tests for the JSON error envelope"""

    def test_malformed_json_body(self, client):
        """Unparseable body returns 400 with an error string"""
        response = client.post(
            "/departments", content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert isinstance(response.json()["error"], str)

    def test_unexpected_error_hides_details(self, client, monkeypatch):
        """Unhandled failures return a generic 500 without driver text"""

        def explode(self):
            raise RuntimeError("connection to server at 10.0.0.5 failed")

        monkeypatch.setattr(DepartmentService, "list_departments", explode)

        with TestClient(app, raise_server_exceptions=False) as unsafe_client:
            response = unsafe_client.get("/departments")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "10.0.0.5" not in response.text

"""
Component tests for health and service info endpoints
"""
import pytest

pytestmark = pytest.mark.component


class TestHealth:
    @pytest.mark.parametrize("path", ["/health", "/api/v1/shipments/health"])
    def test_healthy(self, client, seeded_service, path):
        response = client.get(path)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "shipment_tracking_service"
        assert data["shipments"] == 4
        assert data["dependencies"] == {"engine": "healthy"}

    def test_degraded_without_engine(self, unavailable_client):
        response = unavailable_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"


class TestServiceInfo:
    def test_info(self, client):
        response = client.get("/api/v1/shipments/info")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "shipment_tracking_service"
        assert "update_processing" in data["capabilities"]
        assert data["update_types"] == sorted(
            ["created", "shipped", "location", "delayed", "delivered", "lost", "canceled", "noteadded"]
        )

    def test_info_is_not_a_shipment_id(self, client):
        """The info route wins over /{shipment_id}"""
        response = client.get("/api/v1/shipments/info")
        assert "capabilities" in response.json()

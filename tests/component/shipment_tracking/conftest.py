"""
Component Test Fixtures for Shipment Tracking Service

Provides fixtures for component testing with FastAPI TestClient.
"""

import os
import sys
from datetime import timezone
from unittest.mock import patch

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from microservices.shipment_tracking_service.tracking_service import ShipmentTrackingService


@pytest.fixture
def api_service():
    """In-memory engine evaluating delivery windows in UTC"""
    return ShipmentTrackingService(tz=timezone.utc)


@pytest.fixture
def client(api_service):
    """Create FastAPI test client with the engine injected"""
    from fastapi.testclient import TestClient

    with patch("microservices.shipment_tracking_service.main.tracking_service", api_service):

        from microservices.shipment_tracking_service.main import app

        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client


@pytest.fixture
def unavailable_client():
    """Test client whose engine was never initialized"""
    from fastapi.testclient import TestClient

    from microservices.shipment_tracking_service.main import app

    # Without the lifespan the module-level service stays None
    with patch("microservices.shipment_tracking_service.main.tracking_service", None):
        yield TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def seeded_service(api_service, base_ts):
    """Engine holding one shipment of each type"""
    for shipment_id, shipment_type in (
        ("STD1", "STANDARD"),
        ("EXP1", "EXPRESS"),
        ("OVN1", "OVERNIGHT"),
        ("BLK1", "BULK"),
    ):
        api_service.process(f"created,{shipment_id},{base_ts},{shipment_type}")
    return api_service

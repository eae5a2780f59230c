"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - integration/: Batch replay through the simulator (real files, no mocks)
    - component/  : HTTP adapter tests (TestClient, in-memory engine)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from datetime import timezone
from typing import Generator

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    # Common
    make_shipment_id,
    make_timestamp,
    # Shipment tracking
    make_update_line,
    make_update,
    make_shipment,
    RecordingObserver,
)

from microservices.shipment_tracking_service.shipment_registry import ShipmentRegistry
from microservices.shipment_tracking_service.tracking_service import ShipmentTrackingService


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Test configuration"""

    # Fixed reference instant used by scenario tests: 2024-01-01 10:00:00 UTC
    BASE_TIMESTAMP = make_timestamp("2024-01-01T10:00:00Z")
    DAY_MS = 24 * 60 * 60 * 1000
    HOUR_MS = 60 * 60 * 1000

    # Timeouts
    OBSERVER_JOIN_TIMEOUT = 5


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def registry() -> ShipmentRegistry:
    """Fresh in-memory registry"""
    return ShipmentRegistry()


@pytest.fixture
def tracking_service(registry: ShipmentRegistry) -> Generator[ShipmentTrackingService, None, None]:
    """Tracking service evaluating delivery windows in UTC"""
    service = ShipmentTrackingService(registry=registry, tz=timezone.utc)
    yield service
    service.reset()


@pytest.fixture
def recorder() -> RecordingObserver:
    """Observer that records every notification"""
    return RecordingObserver()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def shipment_id() -> str:
    return make_shipment_id()


@pytest.fixture
def base_ts(test_config: TestConfig) -> int:
    return test_config.BASE_TIMESTAMP


@pytest.fixture
def sample_shipment(shipment_id: str, base_ts: int):
    return make_shipment(shipment_id=shipment_id, created_timestamp=base_ts)


@pytest.fixture
def sample_update(shipment_id: str, base_ts: int):
    return make_update("created", shipment_id, base_ts)


@pytest.fixture
def created_line(shipment_id: str, base_ts: int) -> str:
    return make_update_line("created", shipment_id, base_ts)

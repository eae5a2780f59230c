#!/usr/bin/env python3
"""
Integration Test Pytest Configuration

Integration tests drive the tracking simulator against real update files on
disk; nothing is mocked.
"""

import os
import sys
from datetime import timezone
from pathlib import Path
from typing import Callable, List

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from microservices.shipment_tracking_service.simulator import TrackingSimulator
from microservices.shipment_tracking_service.tracking_service import ShipmentTrackingService


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def simulation_service() -> ShipmentTrackingService:
    return ShipmentTrackingService(tz=timezone.utc)


@pytest.fixture
def simulator(simulation_service) -> TrackingSimulator:
    """Simulator with no pause between updates"""
    return TrackingSimulator(simulation_service, delay_seconds=0)


@pytest.fixture
def write_updates(tmp_path: Path) -> Callable[[List[str]], Path]:
    """Write update lines to a file and return its path"""

    def _write(lines: List[str], name: str = "updates.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write

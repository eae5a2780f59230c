"""
Shared Test Fixtures

Centralized factories and test doubles used across all test layers.

Structure:
    - common.py: ID generators, millisecond timestamps
    - shipment_fixtures.py: Update records, shipments, recording observers
"""

# Common utilities
from .common import (
    make_shipment_id,
    make_timestamp,
)

# Shipment tracking fixtures
from .shipment_fixtures import (
    make_update_line,
    make_update,
    make_shipment,
    RecordingObserver,
    FailingObserver,
)

__all__ = [
    # Common
    "make_shipment_id",
    "make_timestamp",
    # Shipment tracking
    "make_update_line",
    "make_update",
    "make_shipment",
    "RecordingObserver",
    "FailingObserver",
]

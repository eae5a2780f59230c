"""
Shipment Tracking Fixtures

Factories for update records, shipments and recording observers.
"""
from typing import List, Optional

from microservices.shipment_tracking_service.models import (
    Shipment,
    ShipmentType,
    ShippingUpdate,
)


def make_update_line(
    update_type: str,
    shipment_id: str,
    timestamp: int,
    payload: Optional[str] = None,
) -> str:
    """Build one `type,id,timestamp[,payload]` record"""
    line = f"{update_type},{shipment_id},{timestamp}"
    if payload is not None:
        line += f",{payload}"
    return line


def make_update(
    update_type: str = "created",
    shipment_id: str = "SHIP_001",
    timestamp: int = 1700000000000,
    other_info: Optional[List[str]] = None,
) -> ShippingUpdate:
    """Build a ShippingUpdate directly"""
    return ShippingUpdate(
        update_type=update_type,
        shipment_id=shipment_id,
        timestamp=timestamp,
        other_info=other_info or [],
    )


def make_shipment(
    shipment_id: str = "SHIP_001",
    shipment_type: ShipmentType = ShipmentType.STANDARD,
    created_timestamp: int = 1700000000000,
) -> Shipment:
    """Build a fresh shipment with status Unknown"""
    return Shipment(
        id=shipment_id,
        shipment_type=shipment_type,
        created_timestamp=created_timestamp,
    )


class RecordingObserver:
    """Observer that keeps a snapshot of every notification it receives"""

    def __init__(self, name: str = "recorder"):
        self.name = name
        self.received: List[Shipment] = []

    def notify(self, shipment: Shipment) -> None:
        self.received.append(shipment.snapshot())

    @property
    def call_count(self) -> int:
        return len(self.received)

    @property
    def last(self) -> Optional[Shipment]:
        return self.received[-1] if self.received else None

    def reset(self) -> None:
        self.received = []


class FailingObserver:
    """Observer that always raises"""

    def __init__(self):
        self.calls = 0

    def notify(self, shipment: Shipment) -> None:
        self.calls += 1
        raise RuntimeError("observer failure")

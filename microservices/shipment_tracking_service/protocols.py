"""
Shipment Tracking Service Protocols

Defines interfaces for dependency injection and testing.
Following the protocol-based architecture pattern.
"""

from typing import Iterator, List, Optional, Protocol, runtime_checkable

from .models import Shipment


# ====================
# Observer Protocol
# ====================


@runtime_checkable
class ShipmentObserverProtocol(Protocol):
    """Listener notified synchronously after every shipment mutation"""

    def notify(self, shipment: Shipment) -> None:
        """Receive the shipment whose state changed"""
        ...


# ====================
# Registry Protocol
# ====================


@runtime_checkable
class ShipmentRegistryProtocol(Protocol):
    """Protocol for the live shipment-id -> shipment mapping"""

    def add(self, shipment: Shipment) -> None:
        """Register shipment under its ID"""
        ...

    def get(self, shipment_id: str) -> Optional[Shipment]:
        """Get shipment by ID, None when absent"""
        ...

    def require(self, shipment_id: str) -> Shipment:
        """Get shipment by ID or raise ShipmentNotFoundError"""
        ...

    def remove(self, shipment_id: str) -> Optional[Shipment]:
        """Discard shipment, returning it if it was registered"""
        ...

    def list_ids(self) -> List[str]:
        """IDs in registration order"""
        ...

    def all(self) -> Iterator[Shipment]:
        """Iterate shipments in registration order"""
        ...

    def reset(self) -> None:
        """Drop every shipment (tests only)"""
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, shipment_id: object) -> bool:
        ...


# ====================
# Custom Exceptions
# ====================


class ShipmentTrackingError(Exception):
    """Base exception for shipment tracking errors"""
    pass


class MalformedUpdateError(ShipmentTrackingError):
    """Raised when an update record has fewer than three fields"""

    def __init__(self, line: str):
        super().__init__(
            f"Invalid update line format (missing type, ID, or timestamp): {line}"
        )
        self.line = line


class InvalidTimestampError(ShipmentTrackingError):
    """Raised when the timestamp field is not a base-10 integer"""

    def __init__(self, value: str, line: str = ""):
        super().__init__(f"Invalid timestamp '{value}' in update line: {line}")
        self.value = value
        self.line = line


class UnknownShipmentTypeError(ShipmentTrackingError):
    """Raised when a created update names an unsupported shipment type"""

    def __init__(self, type_tag: str):
        super().__init__(
            f"Invalid shipment type string: {type_tag}. "
            f"Must be STANDARD, EXPRESS, OVERNIGHT, or BULK."
        )
        self.type_tag = type_tag


class ShipmentNotFoundError(ShipmentTrackingError):
    """Raised when an update targets a shipment that was never created"""

    def __init__(self, shipment_id: str):
        super().__init__(f"Shipment {shipment_id} not found.")
        self.shipment_id = shipment_id


class UnknownUpdateTypeError(ShipmentTrackingError):
    """Raised when no strategy is registered for an update-type tag"""

    def __init__(self, update_type: str):
        super().__init__(f"Unknown update type '{update_type}'.")
        self.update_type = update_type


class InvalidPayloadError(ShipmentTrackingError):
    """Raised inside a strategy when a numeric payload does not parse.

    Recoverable: the strategy logs it and completes its other effects.
    """

    def __init__(self, payload: str, shipment_id: str = "", update_type: str = ""):
        super().__init__(
            f"Invalid timestamp format in payload for shipment {shipment_id}: {payload}"
        )
        self.payload = payload
        self.shipment_id = shipment_id
        self.update_type = update_type


class AlreadyTrackedError(ShipmentTrackingError):
    """Raised when a tracker is already registered for the shipment"""

    def __init__(self, shipment_id: str):
        super().__init__(f"Shipment {shipment_id} is already being tracked.")
        self.shipment_id = shipment_id


class NotTrackedError(ShipmentTrackingError):
    """Raised when stopping a tracker that is not registered"""

    def __init__(self, shipment_id: str):
        super().__init__(f"Shipment {shipment_id} is not currently tracked.")
        self.shipment_id = shipment_id


__all__ = [
    "ShipmentObserverProtocol",
    "ShipmentRegistryProtocol",
    "ShipmentTrackingError",
    "MalformedUpdateError",
    "InvalidTimestampError",
    "UnknownShipmentTypeError",
    "ShipmentNotFoundError",
    "UnknownUpdateTypeError",
    "InvalidPayloadError",
    "AlreadyTrackedError",
    "NotTrackedError",
]

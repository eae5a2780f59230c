"""
Shipment Tracking Service Data Models

Pydantic models for shipment update events, shipment entities, tracker views
and API request/response payloads.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

if TYPE_CHECKING:
    from .protocols import ShipmentObserverProtocol

logger = logging.getLogger(__name__)


# ====================
# Enum Types
# ====================

class ShipmentType(str, Enum):
    """Shipment service level; determines the delivery-window rule"""
    STANDARD = "STANDARD"
    EXPRESS = "EXPRESS"
    OVERNIGHT = "OVERNIGHT"
    BULK = "BULK"


class UpdateType(str, Enum):
    """Update-type tags accepted in update records (case-sensitive)"""
    CREATED = "created"
    SHIPPED = "shipped"
    LOCATION = "location"
    DELAYED = "delayed"
    DELIVERED = "delivered"
    LOST = "lost"
    CANCELED = "canceled"
    NOTE_ADDED = "noteadded"


class ShipmentStatus(str, Enum):
    """Status labels written onto shipments by update strategies"""
    UNKNOWN = "Unknown"
    CREATED = "Created"
    SHIPPED = "Shipped"
    DELAYED = "Delayed"
    DELIVERED = "Delivered"
    LOST = "Lost"
    CANCELED = "Canceled"


# ====================
# Core Data Models
# ====================

class ShippingUpdate(BaseModel):
    """One parsed update record. Never mutated after parsing."""
    model_config = ConfigDict(frozen=True)

    update_type: str = Field(..., description="Update-type tag, e.g. 'shipped'")
    shipment_id: str = Field(..., description="Target shipment ID")
    timestamp: int = Field(..., description="Update time, milliseconds since epoch")
    other_info: List[str] = Field(default_factory=list, description="Type-specific payload")

    def to_line(self) -> str:
        """Serialize back to the `type,id,timestamp[,payload]` record format"""
        fields = [self.update_type, self.shipment_id, str(self.timestamp)]
        if self.other_info:
            fields.append(self.other_info[0])
        return ",".join(fields)


class Shipment(BaseModel):
    """
    Shipment entity (aggregate root)

    Mutated only through update strategies. `id`, `shipment_type` and
    `created_timestamp` cannot be reassigned after construction. Observers are
    held privately and notified in registration order.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., frozen=True, description="Unique shipment ID")
    shipment_type: ShipmentType = Field(default=ShipmentType.STANDARD, frozen=True)
    created_timestamp: int = Field(..., frozen=True, description="Creation time, ms since epoch")

    status: str = ShipmentStatus.UNKNOWN.value
    expected_delivery_timestamp: Optional[int] = None
    current_location: Optional[str] = None

    notes: List[str] = Field(default_factory=list)
    update_history: List[ShippingUpdate] = Field(default_factory=list)
    rule_violations: List[str] = Field(default_factory=list)

    _observers: List[Any] = PrivateAttr(default_factory=list)

    # Append-only collections

    def add_note(self, note: str) -> None:
        self.notes.append(note)

    def add_update(self, update: ShippingUpdate) -> None:
        self.update_history.append(update)

    def replace_violations(self, violations: List[str]) -> None:
        """Replace the whole violation list with the latest validation result"""
        self.rule_violations = list(violations)

    # Observer registration

    @property
    def observers(self) -> List["ShipmentObserverProtocol"]:
        return list(self._observers)

    def add_observer(self, observer: "ShipmentObserverProtocol") -> None:
        if self._observer_index(observer) is None:
            self._observers.append(observer)

    def remove_observer(self, observer: "ShipmentObserverProtocol") -> None:
        index = self._observer_index(observer)
        if index is not None:
            del self._observers[index]

    def _observer_index(self, observer: "ShipmentObserverProtocol") -> Optional[int]:
        # Registration is by reference; equal-valued observers are distinct
        for index, registered in enumerate(self._observers):
            if registered is observer:
                return index
        return None

    def notify_observers(self) -> None:
        """Synchronously notify every registered observer"""
        for observer in list(self._observers):
            try:
                observer.notify(self)
            except Exception as e:
                logger.error(
                    f"Observer {observer!r} failed for shipment {self.id}: {e}",
                    exc_info=True,
                )

    def snapshot(self) -> "Shipment":
        """Observer-free copy with independent collections"""
        copy = self.model_copy(
            update={
                "notes": list(self.notes),
                "update_history": list(self.update_history),
                "rule_violations": list(self.rule_violations),
            }
        )
        copy._observers = []
        return copy


class TrackerView(BaseModel):
    """Display-friendly projection of a tracked shipment"""
    shipment_id: str
    status: str = "N/A"
    current_location: Optional[str] = None
    expected_delivery: Optional[str] = None
    notes: List[str] = Field(default_factory=list)
    update_history: List[str] = Field(default_factory=list)
    rule_violations: List[str] = Field(default_factory=list)


# ====================
# Request Models
# ====================

class ProcessUpdateRequest(BaseModel):
    """Request model for submitting one update record"""
    update: str = Field(..., description="Raw update record: type,id,timestamp[,payload]")


# ====================
# Response Models
# ====================

class ProcessUpdateResponse(BaseModel):
    """Outcome of processing one update record"""
    success: bool
    message: str
    shipment_id: Optional[str] = None
    update_type: Optional[str] = None
    status: Optional[str] = None
    rule_violations: List[str] = Field(default_factory=list)
    error_type: Optional[str] = Field(None, description="Exception class name when success is false")


class ShipmentResponse(BaseModel):
    """Current shipment state"""
    id: str
    shipment_type: ShipmentType
    created_timestamp: int
    status: str
    expected_delivery_timestamp: Optional[int] = None
    current_location: Optional[str] = None
    notes: List[str] = Field(default_factory=list)
    update_history: List[ShippingUpdate] = Field(default_factory=list)
    rule_violations: List[str] = Field(default_factory=list)
    observer_count: int = 0

    @classmethod
    def from_shipment(cls, shipment: Shipment) -> "ShipmentResponse":
        return cls(
            id=shipment.id,
            shipment_type=shipment.shipment_type,
            created_timestamp=shipment.created_timestamp,
            status=shipment.status,
            expected_delivery_timestamp=shipment.expected_delivery_timestamp,
            current_location=shipment.current_location,
            notes=list(shipment.notes),
            update_history=list(shipment.update_history),
            rule_violations=list(shipment.rule_violations),
            observer_count=len(shipment.observers),
        )


class ShipmentListResponse(BaseModel):
    """List of shipments"""
    shipments: List[ShipmentResponse]
    total: int


class TrackerResponse(BaseModel):
    """Tracker registration / view response"""
    success: bool
    message: str
    view: Optional[TrackerView] = None


class SimulationSummary(BaseModel):
    """Counts from a batch replay"""
    total_lines: int = 0
    processed: int = 0
    failed: int = 0
    skipped: int = 0
    messages: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    port: int
    version: str
    shipments: int = 0
    dependencies: Dict[str, str] = Field(default_factory=dict)


class ServiceInfo(BaseModel):
    """Service information"""
    service: str
    version: str
    description: str
    capabilities: List[str]
    update_types: List[str] = Field(default_factory=list)

"""
Shipment Registry

In-memory mapping from shipment ID to shipment. Owns shipment lifetime for
the process; nothing is persisted. Constructed explicitly and injected into
the tracking service, so independent registries can coexist (one per test,
one per service instance).
"""

import logging
import threading
from typing import Dict, Iterator, List, Optional

from .models import Shipment
from .protocols import ShipmentNotFoundError

logger = logging.getLogger(__name__)


class ShipmentRegistry:
    """Thread-safe in-memory shipment registry"""

    def __init__(self):
        self._shipments: Dict[str, Shipment] = {}
        self._lock = threading.RLock()

    def add(self, shipment: Shipment) -> None:
        """Register shipment under its ID, replacing any previous entry"""
        with self._lock:
            if shipment.id in self._shipments:
                logger.warning(f"Replacing registered shipment {shipment.id}")
            self._shipments[shipment.id] = shipment

    def get(self, shipment_id: str) -> Optional[Shipment]:
        with self._lock:
            return self._shipments.get(shipment_id)

    def require(self, shipment_id: str) -> Shipment:
        shipment = self.get(shipment_id)
        if shipment is None:
            raise ShipmentNotFoundError(shipment_id)
        return shipment

    def remove(self, shipment_id: str) -> Optional[Shipment]:
        with self._lock:
            return self._shipments.pop(shipment_id, None)

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._shipments)

    def all(self) -> Iterator[Shipment]:
        with self._lock:
            shipments = list(self._shipments.values())
        yield from shipments

    def reset(self) -> None:
        """Drop every shipment (tests only)"""
        with self._lock:
            self._shipments.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._shipments)

    def __contains__(self, shipment_id: object) -> bool:
        with self._lock:
            return shipment_id in self._shipments


__all__ = ["ShipmentRegistry"]

"""
Shipment Update Strategies

One strategy per update-type tag. Every strategy mutates the shipment, then
appends the update to its history, then notifies its observers, in that
order. Strategies carrying a delivery timestamp (shipped, delayed) also run
the delivery-window validator and replace the shipment's violations.
"""

import logging
from abc import ABC, abstractmethod
from datetime import tzinfo
from typing import Dict, Optional

from .models import Shipment, ShipmentStatus, ShippingUpdate, UpdateType
from .protocols import InvalidPayloadError, InvalidTimestampError
from .rule_validator import TIMESTAMP_RANGE_ERRORS, to_datetime, validate_delivery_window
from .update_parser import parse_timestamp

logger = logging.getLogger(__name__)


class UpdateStrategy(ABC):
    """Mutation behaviour bound to one update-type tag"""

    update_type: str = ""

    def apply(self, shipment: Shipment, update: ShippingUpdate) -> None:
        """Apply update to shipment: mutate, record history, notify"""
        self.mutate(shipment, update)
        shipment.add_update(update)
        shipment.notify_observers()

    @abstractmethod
    def mutate(self, shipment: Shipment, update: ShippingUpdate) -> None:
        """Change the shipment fields owned by this update type"""
        raise NotImplementedError


class StatusStrategy(UpdateStrategy):
    """Sets a fixed status label and touches nothing else"""

    status: ShipmentStatus = ShipmentStatus.UNKNOWN

    def mutate(self, shipment: Shipment, update: ShippingUpdate) -> None:
        shipment.status = self.status.value


class CreatedStrategy(StatusStrategy):
    update_type = UpdateType.CREATED.value
    status = ShipmentStatus.CREATED


class LostStrategy(StatusStrategy):
    update_type = UpdateType.LOST.value
    status = ShipmentStatus.LOST


class CanceledStrategy(StatusStrategy):
    update_type = UpdateType.CANCELED.value
    status = ShipmentStatus.CANCELED


class DeliveredStrategy(StatusStrategy):
    update_type = UpdateType.DELIVERED.value
    status = ShipmentStatus.DELIVERED

    def mutate(self, shipment: Shipment, update: ShippingUpdate) -> None:
        super().mutate(shipment, update)
        shipment.expected_delivery_timestamp = None


class DeliveryWindowStrategy(StatusStrategy):
    """Status change plus an optional new expected-delivery timestamp.

    An unparseable or out-of-range timestamp payload is logged and skipped;
    the status change, history append and notification still happen.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz

    def mutate(self, shipment: Shipment, update: ShippingUpdate) -> None:
        super().mutate(shipment, update)
        if not update.other_info:
            return

        try:
            expected_delivery = self._parse_delivery(shipment, update)
        except InvalidPayloadError as e:
            logger.warning(f"{type(self).__name__}: {e}")
            return

        shipment.expected_delivery_timestamp = expected_delivery
        try:
            violations = validate_delivery_window(
                shipment.shipment_type,
                shipment.created_timestamp,
                expected_delivery,
                update.update_type,
                tz=self.tz,
            )
        except TIMESTAMP_RANGE_ERRORS as e:
            # Creation time outside the calendar range; nothing to check against
            logger.warning(
                f"{type(self).__name__}: delivery window not checked for shipment {shipment.id}: {e}"
            )
            violations = []
        shipment.replace_violations(violations)

    def _parse_delivery(self, shipment: Shipment, update: ShippingUpdate) -> int:
        payload = update.other_info[0]
        try:
            expected_delivery = parse_timestamp(payload)
        except InvalidTimestampError:
            raise InvalidPayloadError(payload, shipment.id, update.update_type) from None

        try:
            to_datetime(expected_delivery, self.tz)
        except TIMESTAMP_RANGE_ERRORS:
            raise InvalidPayloadError(payload, shipment.id, update.update_type) from None
        return expected_delivery


class ShippedStrategy(DeliveryWindowStrategy):
    update_type = UpdateType.SHIPPED.value
    status = ShipmentStatus.SHIPPED


class DelayedStrategy(DeliveryWindowStrategy):
    update_type = UpdateType.DELAYED.value
    status = ShipmentStatus.DELAYED


class LocationStrategy(UpdateStrategy):
    update_type = UpdateType.LOCATION.value

    def mutate(self, shipment: Shipment, update: ShippingUpdate) -> None:
        if update.other_info:
            shipment.current_location = update.other_info[0]


class NoteAddedStrategy(UpdateStrategy):
    update_type = UpdateType.NOTE_ADDED.value

    def mutate(self, shipment: Shipment, update: ShippingUpdate) -> None:
        if update.other_info:
            shipment.add_note(update.other_info[0])


def build_strategy_table(tz: Optional[tzinfo] = None) -> Dict[str, UpdateStrategy]:
    """Dispatch table from update-type tag to strategy"""
    strategies = [
        CreatedStrategy(),
        ShippedStrategy(tz=tz),
        LocationStrategy(),
        DelayedStrategy(tz=tz),
        DeliveredStrategy(),
        LostStrategy(),
        CanceledStrategy(),
        NoteAddedStrategy(),
    ]
    return {strategy.update_type: strategy for strategy in strategies}


__all__ = [
    "UpdateStrategy",
    "StatusStrategy",
    "DeliveryWindowStrategy",
    "CreatedStrategy",
    "ShippedStrategy",
    "LocationStrategy",
    "DelayedStrategy",
    "DeliveredStrategy",
    "LostStrategy",
    "CanceledStrategy",
    "NoteAddedStrategy",
    "build_strategy_table",
]

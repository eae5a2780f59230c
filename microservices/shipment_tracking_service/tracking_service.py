"""
Shipment Tracking Service Business Logic

Processes raw update records: parse, find or create the target shipment,
dispatch to the strategy registered for the update type. Every failure is
turned into a ProcessUpdateResponse here; nothing raised while processing an
update escapes process_update().
"""

import logging
import threading
from datetime import tzinfo
from typing import Dict, Iterable, List, Optional

from .models import (
    ProcessUpdateResponse,
    Shipment,
    ShippingUpdate,
    UpdateType,
)
from .observers import ShipmentTracker
from .protocols import (
    AlreadyTrackedError,
    NotTrackedError,
    ShipmentNotFoundError,
    ShipmentObserverProtocol,
    ShipmentRegistryProtocol,
    ShipmentTrackingError,
    UnknownUpdateTypeError,
)
from .shipment_factory import create_shipment
from .shipment_registry import ShipmentRegistry
from .update_parser import parse_update
from .update_strategies import UpdateStrategy, build_strategy_table

logger = logging.getLogger(__name__)


class ShipmentTrackingService:
    """Shipment tracking core: update processing and tracker registration"""

    def __init__(
        self,
        registry: Optional[ShipmentRegistryProtocol] = None,
        strategies: Optional[Dict[str, UpdateStrategy]] = None,
        tz: Optional[tzinfo] = None,
        default_shipment_type: str = "Standard",
    ):
        """
        Initialize tracking service with injected dependencies

        Args:
            registry: Shipment registry (a fresh in-memory one if not provided)
            strategies: Update-type tag -> strategy table (defaults to all eight)
            tz: Zone for delivery-window calendar dates (local time when None)
            default_shipment_type: Type used when a created update names none
        """
        self.registry = registry if registry is not None else ShipmentRegistry()
        self.tz = tz
        self.strategies = strategies if strategies is not None else build_strategy_table(tz)
        self.default_shipment_type = default_shipment_type
        self._trackers: Dict[str, ShipmentTracker] = {}
        self._lock = threading.RLock()

        logger.info("ShipmentTrackingService initialized with dependency injection")

    # ====================
    # Update Processing
    # ====================

    def process_update(self, raw_line: str) -> ProcessUpdateResponse:
        """Process one raw update record"""
        try:
            update = parse_update(raw_line)
        except ShipmentTrackingError as e:
            logger.warning(f"Failed to parse update string '{raw_line}': {e}")
            return ProcessUpdateResponse(
                success=False,
                message=f"Error processing update: {e}",
                error_type=type(e).__name__,
            )
        return self.apply_update(update)

    def apply_update(self, update: ShippingUpdate) -> ProcessUpdateResponse:
        """Process one already-parsed update"""
        try:
            with self._lock:
                shipment = self._dispatch(update)
        except (ShipmentNotFoundError, UnknownUpdateTypeError) as e:
            logger.warning(
                f"Rejected '{update.update_type}' update for {update.shipment_id}: {e}"
            )
            return ProcessUpdateResponse(
                success=False,
                message=f"Error: {e}",
                shipment_id=update.shipment_id,
                update_type=update.update_type,
                error_type=type(e).__name__,
            )
        except Exception as e:
            logger.error(f"Failed to process update string '{update.to_line()}': {e}")
            return ProcessUpdateResponse(
                success=False,
                message=f"Error processing update: {e}",
                shipment_id=update.shipment_id,
                update_type=update.update_type,
                error_type=type(e).__name__,
            )

        logger.info(f"Processed '{update.update_type}' update for {update.shipment_id}")
        return ProcessUpdateResponse(
            success=True,
            message=f"Success: Update processed for {update.shipment_id}.",
            shipment_id=shipment.id,
            update_type=update.update_type,
            status=shipment.status,
            rule_violations=list(shipment.rule_violations),
        )

    def process(self, raw_line: str) -> str:
        """Process one raw update record and return the result message"""
        return self.process_update(raw_line).message

    def process_lines(self, lines: Iterable[str]) -> List[ProcessUpdateResponse]:
        """Process a batch of records independently, skipping blank lines"""
        return [self.process_update(line) for line in lines if line.strip()]

    def _dispatch(self, update: ShippingUpdate) -> Shipment:
        shipment = self.registry.get(update.shipment_id)

        if update.update_type == UpdateType.CREATED.value:
            if shipment is None:
                shipment = self._create(update)
            else:
                # Duplicate created entries accumulate in history; type and
                # creation time are left as first recorded.
                logger.warning(
                    f"Shipment {update.shipment_id} already exists. Applying 'created' update again."
                )
        elif shipment is None:
            raise ShipmentNotFoundError(update.shipment_id)

        strategy = self.strategies.get(update.update_type)
        if strategy is None:
            raise UnknownUpdateTypeError(update.update_type)

        strategy.apply(shipment, update)
        return shipment

    def _create(self, update: ShippingUpdate) -> Shipment:
        type_tag = self.default_shipment_type
        if update.other_info and update.other_info[0]:
            type_tag = update.other_info[0]

        shipment = create_shipment(update.shipment_id, type_tag, update.timestamp)
        self.registry.add(shipment)
        logger.info(
            f"Created new shipment: {shipment.id} (Type: {shipment.shipment_type.value})"
        )
        return shipment

    # ====================
    # Queries
    # ====================

    def find_shipment(self, shipment_id: str) -> Optional[Shipment]:
        return self.registry.get(shipment_id)

    def list_shipments(self) -> List[Shipment]:
        return list(self.registry.all())

    # ====================
    # Observers
    # ====================

    def add_observer(self, shipment_id: str, observer: ShipmentObserverProtocol) -> Shipment:
        with self._lock:
            shipment = self.registry.require(shipment_id)
            shipment.add_observer(observer)
            return shipment

    def remove_observer(self, shipment_id: str, observer: ShipmentObserverProtocol) -> Shipment:
        with self._lock:
            shipment = self.registry.require(shipment_id)
            shipment.remove_observer(observer)
            return shipment

    # ====================
    # Tracking
    # ====================

    def track_shipment(self, shipment_id: str) -> ShipmentTracker:
        """
        Start tracking a shipment

        Registers a ShipmentTracker on the shipment and pushes the current
        state to it immediately.

        Raises:
            ShipmentNotFoundError: Shipment does not exist
            AlreadyTrackedError: A tracker is already registered
        """
        with self._lock:
            shipment = self.registry.require(shipment_id)
            if shipment_id in self._trackers:
                raise AlreadyTrackedError(shipment_id)

            tracker = ShipmentTracker(shipment_id, tz=self.tz)
            shipment.add_observer(tracker)
            self._trackers[shipment_id] = tracker
            tracker.notify(shipment)

        logger.info(f"Started tracking shipment {shipment_id}")
        return tracker

    def stop_tracking(self, shipment_id: str) -> ShipmentTracker:
        """
        Stop tracking a shipment

        Raises:
            NotTrackedError: No tracker is registered for the shipment
        """
        with self._lock:
            tracker = self._trackers.pop(shipment_id, None)
            if tracker is None:
                raise NotTrackedError(shipment_id)

            shipment = self.registry.get(shipment_id)
            if shipment is not None:
                shipment.remove_observer(tracker)

        logger.info(f"Stopped tracking shipment {shipment_id}")
        return tracker

    def get_tracker(self, shipment_id: str) -> Optional[ShipmentTracker]:
        return self._trackers.get(shipment_id)

    def tracked_ids(self) -> List[str]:
        return list(self._trackers)

    def reset(self) -> None:
        """Drop every shipment and tracker (tests only)"""
        with self._lock:
            self.registry.reset()
            self._trackers.clear()


__all__ = ["ShipmentTrackingService"]

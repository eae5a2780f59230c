"""
Shipment Tracking Service Factory

Factory for creating ShipmentTrackingService from configuration.
This is the ONLY module that wires concrete implementations together.
"""

import logging
from typing import Optional

from core.config import TrackingConfig, get_settings

from .observers import QueuedObserver
from .protocols import ShipmentObserverProtocol
from .shipment_registry import ShipmentRegistry
from .tracking_service import ShipmentTrackingService

logger = logging.getLogger(__name__)


def create_tracking_service(
    config: Optional[TrackingConfig] = None,
    registry: Optional[ShipmentRegistry] = None,
) -> ShipmentTrackingService:
    """
    Create ShipmentTrackingService with all real dependencies

    Args:
        config: Optional tracking config (global settings if not provided)
        registry: Optional registry to share between callers

    Returns:
        Fully initialized ShipmentTrackingService instance
    """
    if config is None:
        config = get_settings()

    service = ShipmentTrackingService(
        registry=registry if registry is not None else ShipmentRegistry(),
        tz=config.tzinfo(),
        default_shipment_type=config.default_shipment_type,
    )

    logger.info(
        f"ShipmentTrackingService created (timezone={config.timezone or 'local'})"
    )
    return service


def create_queued_observer(
    delegate: ShipmentObserverProtocol,
    config: Optional[TrackingConfig] = None,
) -> QueuedObserver:
    """Wrap an observer for background delivery, sized by NOTIFICATION_QUEUE_SIZE"""
    if config is None:
        config = get_settings()
    return QueuedObserver(delegate, maxsize=config.notification_queue_size)


__all__ = ["create_tracking_service", "create_queued_observer"]

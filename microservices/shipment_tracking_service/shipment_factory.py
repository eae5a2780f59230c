"""
Shipment Factory

Maps a shipment-type tag from a created update onto a new Shipment.
"""

from .models import Shipment, ShipmentType
from .protocols import UnknownShipmentTypeError


def resolve_shipment_type(type_tag: str) -> ShipmentType:
    """Case-insensitive lookup of a shipment type tag"""
    try:
        return ShipmentType(type_tag.strip().upper())
    except ValueError:
        raise UnknownShipmentTypeError(type_tag) from None


def create_shipment(shipment_id: str, type_tag: str, created_at: int) -> Shipment:
    """
    Create a shipment of the tagged type

    The new shipment's status is left at "Unknown"; the created strategy sets
    it once the update is applied.

    Raises:
        UnknownShipmentTypeError: Tag is not STANDARD, EXPRESS, OVERNIGHT or BULK
    """
    return Shipment(
        id=shipment_id,
        shipment_type=resolve_shipment_type(type_tag),
        created_timestamp=created_at,
    )


__all__ = ["create_shipment", "resolve_shipment_type"]

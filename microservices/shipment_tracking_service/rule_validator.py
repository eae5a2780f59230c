"""
Delivery Window Rule Validator

Checks a candidate expected-delivery time against the delivery window of the
shipment's type. Days are counted between calendar dates (midnight to
midnight in the configured zone), not as raw 24-hour spans: a shipment created
at 23:00 and due at 01:00 two calendar days later is two days out.

Rules:
    STANDARD   no rule
    EXPRESS    at most 3 days after creation
    OVERNIGHT  exactly 1 day after creation, unless the update is "delayed"
    BULK       at least 3 days after creation
"""

from datetime import date, datetime, tzinfo
from typing import List, Optional

from .models import ShipmentType, UpdateType

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

EXPRESS_MAX_DAYS = 3
OVERNIGHT_DAYS = 1
BULK_MIN_DAYS = 3

# Raised by datetime.fromtimestamp for milliseconds outside the supported range
TIMESTAMP_RANGE_ERRORS = (ValueError, OverflowError, OSError)


def to_datetime(timestamp_ms: int, tz: Optional[tzinfo] = None) -> datetime:
    """Milliseconds since epoch to a datetime in tz (local time when None)"""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz)


def to_calendar_date(timestamp_ms: int, tz: Optional[tzinfo] = None) -> date:
    return to_datetime(timestamp_ms, tz).date()


def format_timestamp(timestamp_ms: int, tz: Optional[tzinfo] = None) -> str:
    return to_datetime(timestamp_ms, tz).strftime(DATETIME_FORMAT)


def calendar_day_difference(
    created_at: int,
    candidate_delivery: int,
    tz: Optional[tzinfo] = None,
) -> int:
    """Whole calendar days from the creation date to the delivery date"""
    return (to_calendar_date(candidate_delivery, tz) - to_calendar_date(created_at, tz)).days


def validate_delivery_window(
    shipment_type: ShipmentType,
    created_at: int,
    candidate_delivery: int,
    update_type: str,
    tz: Optional[tzinfo] = None,
) -> List[str]:
    """
    Validate a candidate delivery time for a shipment type

    Args:
        shipment_type: Type of the shipment being updated
        created_at: Shipment creation time (ms since epoch)
        candidate_delivery: Proposed expected delivery time (ms since epoch)
        update_type: Tag of the update carrying the delivery time
        tz: Zone used for calendar dates and message formatting

    Returns:
        Zero or one violation message. Callers replace the shipment's
        violation list with this result.
    """
    if shipment_type == ShipmentType.STANDARD:
        return []

    if shipment_type == ShipmentType.OVERNIGHT and update_type == UpdateType.DELAYED.value:
        return []

    days = calendar_day_difference(created_at, candidate_delivery, tz)
    delivery = format_timestamp(candidate_delivery, tz)
    created = format_timestamp(created_at, tz)

    if shipment_type == ShipmentType.EXPRESS and days > EXPRESS_MAX_DAYS:
        return [
            f"Express shipment delivery date ({delivery}) is more than "
            f"{EXPRESS_MAX_DAYS} days after creation ({created})."
        ]
    if shipment_type == ShipmentType.OVERNIGHT and days != OVERNIGHT_DAYS:
        return [
            f"Overnight shipment delivery date ({delivery}) is not exactly "
            f"{OVERNIGHT_DAYS} day after creation ({created})."
        ]
    if shipment_type == ShipmentType.BULK and days < BULK_MIN_DAYS:
        return [
            f"Bulk shipment delivery date ({delivery}) is sooner than "
            f"{BULK_MIN_DAYS} days after creation ({created})."
        ]
    return []


__all__ = [
    "validate_delivery_window",
    "calendar_day_difference",
    "format_timestamp",
    "to_calendar_date",
    "to_datetime",
    "DATETIME_FORMAT",
    "TIMESTAMP_RANGE_ERRORS",
]

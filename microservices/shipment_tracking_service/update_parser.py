"""
Update Record Parser

Turns one `updateType,shipmentId,timestampMillis[,payload]` record into a
ShippingUpdate. Everything after the third comma is one opaque payload
string, so free-text notes and locations may contain commas.
"""

import re
from typing import Iterable, Iterator, Tuple, Union

from .models import ShippingUpdate
from .protocols import (
    InvalidTimestampError,
    MalformedUpdateError,
    ShipmentTrackingError,
)

_TIMESTAMP_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_timestamp(value: str, line: str = "") -> int:
    """Parse a base-10 integer timestamp, rejecting floats, hex and separators"""
    value = value.strip()
    if not _TIMESTAMP_PATTERN.fullmatch(value):
        raise InvalidTimestampError(value, line)
    return int(value)


def parse_update(line: str) -> ShippingUpdate:
    """
    Parse one update record

    Args:
        line: Raw record text

    Returns:
        ShippingUpdate with at most one other_info element

    Raises:
        MalformedUpdateError: Fewer than three comma-separated fields
        InvalidTimestampError: Third field is not a base-10 integer
    """
    parts = line.split(",", 3)
    if len(parts) < 3:
        raise MalformedUpdateError(line)

    update_type = parts[0].strip()
    shipment_id = parts[1].strip()
    timestamp = parse_timestamp(parts[2], line)
    other_info = [parts[3].strip()] if len(parts) == 4 else []

    return ShippingUpdate(
        update_type=update_type,
        shipment_id=shipment_id,
        timestamp=timestamp,
        other_info=other_info,
    )


def parse_lines(
    lines: Iterable[str],
) -> Iterator[Tuple[int, Union[ShippingUpdate, ShipmentTrackingError]]]:
    """Parse a batch of records, yielding (line_number, update_or_error).

    Blank lines are skipped; line numbers are 1-based.
    """
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield number, parse_update(line)
        except ShipmentTrackingError as e:
            yield number, e


__all__ = ["parse_update", "parse_timestamp", "parse_lines"]

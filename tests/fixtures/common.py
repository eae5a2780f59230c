"""
Common/Shared Fixtures

Base factories and generators used across test layers.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional


def make_shipment_id(prefix: str = "SHIP") -> str:
    """Generate a unique shipment ID"""
    return f"{prefix}_{uuid.uuid4().hex[:8].upper()}"


def make_timestamp(iso: Optional[str] = None) -> int:
    """Milliseconds since epoch for an ISO-8601 UTC instant (now when omitted)"""
    if iso is None:
        moment = datetime.now(timezone.utc)
    else:
        moment = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    return int(moment.timestamp() * 1000)

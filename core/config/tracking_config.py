#!/usr/bin/env python3
"""Shipment tracking service configuration

Service settings for the shipment tracking engine: network binding for the
update endpoint, the time zone used for delivery-window rules, and batch
replay pacing.
"""
import os
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from .logging_config import LoggingConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class TrackingConfig:
    """Main shipment tracking configuration"""

    # Environment
    environment: str = "development"
    debug: bool = False

    # Service binding
    service_name: str = "shipment_tracking_service"
    service_host: str = "127.0.0.1"
    service_port: int = 8080

    # Delivery rules
    timezone: str = ""  # empty = system local zone
    default_shipment_type: str = "Standard"

    # Replay / notification
    simulation_delay_seconds: float = 1.0
    notification_queue_size: int = 100

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_level(self) -> str:
        return self.logging.log_level

    def tzinfo(self) -> Optional[tzinfo]:
        """Zone for calendar-day arithmetic, None means local time"""
        if not self.timezone:
            return None
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> 'TrackingConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "false")),
            service_name=os.getenv("SERVICE_NAME", "shipment_tracking_service"),
            service_host=os.getenv("SERVICE_HOST", "127.0.0.1"),
            service_port=_int(os.getenv("PORT", "8080"), 8080),
            timezone=os.getenv("TRACKING_TIMEZONE", ""),
            default_shipment_type=os.getenv("DEFAULT_SHIPMENT_TYPE", "Standard"),
            simulation_delay_seconds=_float(os.getenv("SIMULATION_DELAY_SECONDS", "1.0"), 1.0),
            notification_queue_size=_int(os.getenv("NOTIFICATION_QUEUE_SIZE", "100"), 100),
            logging=LoggingConfig.from_env(),
        )

#!/usr/bin/env python3
"""
Core Module for the Shipment Tracking Service

Shared infrastructure used by the service package.

COMPONENTS:
    - config/: Environment-driven configuration (TrackingConfig, LoggingConfig)
    - logger.py: Service logger setup

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    config = get_settings()
    logger = setup_service_logger(config.service_name, level=config.log_level)
"""

from .logger import setup_service_logger

__all__ = [
    "setup_service_logger",
]

__version__ = "1.0.0"

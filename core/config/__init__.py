#!/usr/bin/env python3
"""Shipment tracking configuration

Settings come from the process environment, optionally seeded from a dotenv
file. The file is TRACKING_ENV_FILE when set, otherwise the per-environment
file under deployment/shipment_tracking/ chosen by ENV. Values already in the
environment always win over the file.

- tracking_config: HTTP binding, delivery-rule time zone, replay pacing,
  notification queue size
- logging_config: Log level, format and optional log file
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .tracking_config import TrackingConfig

ENV_FILE_DIR = "deployment/shipment_tracking"

env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_names = {
    "development": "development",
    "dev": "development",
    "testing": "testing",
    "test": "testing",
    "production": "production",
    "prod": "production",
}
env_file = os.getenv("TRACKING_ENV_FILE") or os.path.join(
    ENV_FILE_DIR, f"{env_names.get(env, 'development')}.env"
)
load_dotenv(env_file, override=False)

settings = TrackingConfig.from_env()

def get_settings() -> TrackingConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> TrackingConfig:
    """Reload settings from environment"""
    global settings
    settings = TrackingConfig.from_env()
    return settings

__all__ = [
    'TrackingConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]

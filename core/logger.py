#!/usr/bin/env python3
"""
Service logger setup

Configures a named logger for a service from LoggingConfig: console output,
optional log file, shared format.
"""

import logging
import sys
from typing import Optional

from .config.logging_config import LoggingConfig


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure and return the logger for a service

    Args:
        service_name: Logger name (usually the service package name)
        level: Log level override (e.g. "INFO"); defaults to config.log_level
        config: Logging configuration (loaded from environment if not provided)

    Returns:
        Configured logger. Calling again does not add duplicate handlers.
    """
    if config is None:
        config = LoggingConfig.from_env()

    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    if getattr(logger, "_service_handlers_configured", False):
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger._service_handlers_configured = True
    return logger


__all__ = ["setup_service_logger"]

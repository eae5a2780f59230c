"""
Unit tests for service logger setup
"""
import logging

import pytest

from core.config import LoggingConfig
from core.logger import setup_service_logger

pytestmark = pytest.mark.unit


class TestSetupServiceLogger:
    def test_console_handler_and_level(self):
        logger = setup_service_logger("tests.logger.console", level="warning", config=LoggingConfig())

        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_setup_adds_no_handlers(self):
        config = LoggingConfig()
        setup_service_logger("tests.logger.repeat", config=config)
        logger = setup_service_logger("tests.logger.repeat", level="ERROR", config=config)

        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "service.log"
        config = LoggingConfig(log_file=str(log_file), enable_console=False)

        logger = setup_service_logger("tests.logger.file", level="INFO", config=config)
        logger.info("shipment S1 created")
        for handler in logger.handlers:
            handler.flush()
            handler.close()

        assert "shipment S1 created" in log_file.read_text(encoding="utf-8")
        assert " - tests.logger.file - INFO - " in log_file.read_text(encoding="utf-8")

"""Tests for logging utilities."""

import logging

from rich.logging import RichHandler

from prm_discovery.client.auth import discovery
from prm_discovery.utilities.logging import configure_logging


def test_module_loggers_sit_under_package_logger():
    assert discovery.logger.name == "prm_discovery.client.auth.discovery"


def test_configure_logging_installs_single_rich_handler():
    logger = logging.getLogger("prm_discovery")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    try:
        configure_logging("DEBUG")
        configure_logging("WARNING")

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        logger.handlers = original_handlers
        logger.setLevel(original_level)


def test_configure_logging_level_from_settings(monkeypatch):
    monkeypatch.setenv("PRM_LOG_LEVEL", "ERROR")
    logger = logging.getLogger("prm_discovery")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    try:
        configure_logging()
        assert logger.level == logging.ERROR
    finally:
        logger.handlers = original_handlers
        logger.setLevel(original_level)

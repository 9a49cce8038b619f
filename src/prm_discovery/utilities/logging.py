"""Logging utilities for prm-discovery."""

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

from prm_discovery.settings import get_settings


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None,
) -> None:
    """Configure logging for prm-discovery.

    Args:
        level: the log level to use; defaults to PRM_LOG_LEVEL
    """
    logger = logging.getLogger("prm_discovery")
    logger.setLevel(level or get_settings().log_level)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

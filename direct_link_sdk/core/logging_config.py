"""
Logging Configuration Module.

This module provides opt-in logging configuration for applications that use the
Direct Link SDK. The SDK itself only emits records through
``logging.getLogger(__name__)``; nothing is configured at import time.

Features:
- Configurable log level for the SDK loggers
- Simple, detailed or JSON console formats
- Quieter third-party HTTP loggers
"""

import logging
from typing import Dict, Optional

from direct_link_sdk.core.config import get_settings

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

SDK_LOGGER_NAME = "direct_link_sdk"

# Third-party libraries (reduce noise)
THIRD_PARTY_LOG_LEVELS: Dict[str, str] = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

_installed_handler: Optional[logging.Handler] = None


def _format_for(name: str) -> str:
    if name == "json":
        return JSON_FORMAT
    if name == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> logging.Handler:
    """
    Attach a console handler to the SDK logger.

    Args:
        log_level: Override the configured level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the configured format (simple, detailed, json)

    Returns:
        The console handler that was installed.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format

    formatter = logging.Formatter(_format_for(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(level)

    # Replace the handler from a previous call; application handlers stay
    global _installed_handler
    if _installed_handler is not None:
        sdk_logger.removeHandler(_installed_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    sdk_logger.addHandler(console_handler)
    _installed_handler = console_handler

    for module_name, module_level in THIRD_PARTY_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    sdk_logger.debug("Logging configured: level=%s, format=%s", level, fmt)
    return console_handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)

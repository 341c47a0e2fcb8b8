"""Logging infrastructure for hive-tabledef.

This module provides structured JSON logging with context tracking and
OpenTelemetry trace correlation.
"""

from tabledef.logging.filters import ContextFilter
from tabledef.logging.logger import PACKAGE_LOGGER, TableDefJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "TableDefJsonFormatter",
    "PACKAGE_LOGGER",
    "ContextFilter",
]

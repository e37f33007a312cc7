"""Observability – structured logging helpers."""
from metrics_core.observability.logging.factory import JsonLoggerFactory
from metrics_core.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

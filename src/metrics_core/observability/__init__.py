"""Observability of the library itself – structured logging."""

from metrics_core.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

"""Observability – structured logging."""
from mp_cloudevents.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

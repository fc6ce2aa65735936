"""Observability – structured logging helpers."""
from listfetch.observability.logging.factory import JsonLoggerFactory
from listfetch.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

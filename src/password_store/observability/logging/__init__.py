"""Observability – structured logging helpers."""
from password_store.observability.logging.filters import SensitiveFieldsFilter
from password_store.observability.logging.factory import JsonLoggerFactory
from password_store.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = [
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]

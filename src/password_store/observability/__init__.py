"""Observability – structured logging and request correlation."""
from password_store.observability.correlation import CorrelationContext, RequestContext
from password_store.observability.logging import (
    CorrelationProcessor,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = [
    "CorrelationContext",
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "RequestContext",
    "SensitiveFieldsFilter",
    "get_logger",
]

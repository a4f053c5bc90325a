"""Kernel – framework-agnostic building blocks."""

from password_store.kernel.errors import (
    AlreadyExistsError,
    BaseError,
    ConflictError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    MalformedReferenceError,
    NotFoundError,
)

__all__ = [
    "AlreadyExistsError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "MalformedReferenceError",
    "NotFoundError",
]

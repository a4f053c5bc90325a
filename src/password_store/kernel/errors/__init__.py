"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── NotFoundError
    │   ├── AlreadyExistsError
    │   ├── ConflictError
    │   └── MalformedReferenceError
    └── InfrastructureError      (infrastructure.py)
        └── ExternalServiceError
"""

from password_store.kernel.errors.base import BaseError
from password_store.kernel.errors.domain import (
    AlreadyExistsError,
    ConflictError,
    DomainError,
    MalformedReferenceError,
    NotFoundError,
)
from password_store.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
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

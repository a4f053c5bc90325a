"""Domain errors: backend lookups, write races and reference format."""

from __future__ import annotations

from typing import Any

from password_store.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a storage rule is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested secret, namespace or resource does not exist."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class AlreadyExistsError(DomainError):
    """A create targeted a key that is already taken."""

    default_code = "already_exists"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        msg = f"{resource} already exists"
        if identifier is not None:
            msg = f"{resource} '{identifier}' already exists"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """An update lost an optimistic-concurrency race."""

    default_code = "conflict"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"{resource} '{identifier}' was modified concurrently"
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


class MalformedReferenceError(DomainError):
    """A value is not a ``namespace:name`` reference.

    The offending value is deliberately left out of the message: it is
    usually a plaintext password that has not been redacted yet.
    """

    default_code = "malformed_reference"

    def __init__(self, message: str = "value is not a 'namespace:name' reference", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "AlreadyExistsError",
    "ConflictError",
    "DomainError",
    "MalformedReferenceError",
    "NotFoundError",
]

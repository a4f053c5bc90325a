"""Testing fixtures – pytest fixtures for the in-memory doubles."""
from __future__ import annotations

import pytest

from password_store.observability.correlation import CorrelationContext, RequestContext
from password_store.testing.fakes import (
    InMemoryNamespaceBackend,
    InMemoryResourceStore,
    InMemorySecretBackend,
)


@pytest.fixture
def secret_backend() -> InMemorySecretBackend:
    return InMemorySecretBackend()


@pytest.fixture
def namespace_backend() -> InMemoryNamespaceBackend:
    return InMemoryNamespaceBackend()


@pytest.fixture
def resource_store() -> InMemoryResourceStore:
    return InMemoryResourceStore()


@pytest.fixture
def request_ctx():
    """A RequestContext, also set as the ambient correlation context."""
    ctx = RequestContext(correlation_id="test-correlation-id", user_id="user-1")
    CorrelationContext.set(ctx)
    yield ctx
    CorrelationContext.clear()


__all__ = ["namespace_backend", "request_ctx", "resource_store", "secret_backend"]

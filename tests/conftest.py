"""Shared pytest fixtures."""
from password_store.testing.fixtures import (  # noqa: F401
    namespace_backend,
    request_ctx,
    resource_store,
    secret_backend,
)

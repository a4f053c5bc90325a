"""Testing support – in-memory fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["password_store.testing.fixtures"]
"""

from password_store.testing.fakes import (
    InMemoryNamespaceBackend,
    InMemoryResourceStore,
    InMemorySecretBackend,
)

__all__ = [
    "InMemoryNamespaceBackend",
    "InMemoryResourceStore",
    "InMemorySecretBackend",
]

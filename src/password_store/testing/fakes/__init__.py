"""Testing fakes – in-memory doubles for the backend and store ports."""
from password_store.testing.fakes.secrets import InMemoryNamespaceBackend, InMemorySecretBackend
from password_store.testing.fakes.store import InMemoryResourceStore

__all__ = [
    "InMemoryNamespaceBackend",
    "InMemoryResourceStore",
    "InMemorySecretBackend",
]

"""Store – the generic resource store capability set."""
from password_store.store.port import Payload, QueryOptions, ResourceStore

__all__ = ["Payload", "QueryOptions", "ResourceStore"]

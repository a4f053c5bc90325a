"""Secrets – SecretEntry, SecretBackend and NamespaceBackend ports."""
from __future__ import annotations

import abc
import dataclasses


@dataclasses.dataclass(frozen=True)
class SecretEntry:
    """A secret keyed by (namespace, name) holding a small key -> value map.

    ``version`` is the backend's concurrency token; ``None`` on entries that
    have not been persisted yet.
    """
    namespace: str
    name: str
    data: dict[str, str] = dataclasses.field(default_factory=dict)
    type: str = "Opaque"
    version: str | None = None

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclasses.dataclass(frozen=True)
class Namespace:
    name: str


class SecretBackend(abc.ABC):
    """Port: persist secret entries.

    Implementations raise :class:`~password_store.kernel.errors.NotFoundError`
    for missing entries, :class:`~password_store.kernel.errors.AlreadyExistsError`
    when creating a taken key and :class:`~password_store.kernel.errors.ConflictError`
    when ``update`` loses a version check.
    """

    @abc.abstractmethod
    async def get(self, namespace: str, name: str) -> SecretEntry: ...

    @abc.abstractmethod
    async def create(self, entry: SecretEntry) -> SecretEntry: ...

    @abc.abstractmethod
    async def update(self, entry: SecretEntry) -> SecretEntry: ...

    @abc.abstractmethod
    async def delete(self, namespace: str, name: str) -> None: ...


class NamespaceBackend(abc.ABC):
    """Port: namespaces that secret entries live in."""

    @abc.abstractmethod
    async def get(self, name: str) -> Namespace: ...

    @abc.abstractmethod
    async def create(self, name: str) -> Namespace: ...


__all__ = ["Namespace", "NamespaceBackend", "SecretBackend", "SecretEntry"]

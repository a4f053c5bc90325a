"""Secrets – SecretManager.

Idempotent create/update/get/delete of single-key secret entries on top of a
:class:`SecretBackend`, creating namespaces on demand.
"""
from __future__ import annotations

import dataclasses

from password_store.kernel.errors import AlreadyExistsError, NotFoundError
from password_store.observability.logging import get_logger
from password_store.secrets.port import NamespaceBackend, SecretBackend, SecretEntry

logger = get_logger(__name__)


class SecretManager:
    """Store plaintext values as secret entries keyed by their lowercased name.

    Concurrent writers are not serialised here: a lost race surfaces as the
    backend's :class:`~password_store.kernel.errors.ConflictError` (or
    ``AlreadyExistsError`` on create) and is never retried.
    """

    def __init__(
        self,
        secrets: SecretBackend,
        namespaces: NamespaceBackend,
        *,
        secret_type: str = "Opaque",
    ) -> None:
        self._secrets = secrets
        self._namespaces = namespaces
        self._secret_type = secret_type

    async def ensure_namespace(self, namespace: str) -> None:
        try:
            await self._namespaces.get(namespace)
            return
        except NotFoundError:
            pass
        try:
            await self._namespaces.create(namespace)
            logger.info("password_store.namespace_created", namespace=namespace)
        except AlreadyExistsError:
            logger.debug("password_store.namespace_race", namespace=namespace)

    async def create_or_update(self, plaintext: str, name: str, namespace: str) -> SecretEntry:
        """Upsert *plaintext* at ``(namespace, name.lower())``.

        The backend is only written when the stored data differs.
        """
        await self.ensure_namespace(namespace)
        name = name.lower()
        secret = SecretEntry(
            namespace=namespace,
            name=name,
            data={name: plaintext},
            type=self._secret_type,
        )
        try:
            existing = await self._secrets.get(namespace, name)
        except NotFoundError:
            created = await self._secrets.create(secret)
            logger.info("password_store.secret_created", namespace=namespace, name=name)
            return created

        if existing.data == secret.data:
            return existing
        updated = await self._secrets.update(dataclasses.replace(existing, data=secret.data))
        logger.info("password_store.secret_updated", namespace=namespace, name=name)
        return updated

    async def get(self, namespace: str, name: str) -> str:
        """Return the plaintext stored under *name* in ``(namespace, name)``.

        Raises:
            NotFoundError: the entry is missing or has no *name* key.
        """
        entry = await self._secrets.get(namespace, name)
        if name not in entry.data:
            raise NotFoundError("secret key", f"{namespace}/{name}")
        return entry.data[name]

    async def delete(self, namespace: str, name: str) -> None:
        try:
            await self._secrets.delete(namespace, name)
        except NotFoundError:
            return
        logger.info("password_store.secret_deleted", namespace=namespace, name=name)


__all__ = ["SecretManager"]

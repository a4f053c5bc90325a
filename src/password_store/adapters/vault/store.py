"""HashiCorp Vault adapter – VaultSecretBackend and VaultNamespaceBackend.

Each namespace is a KV v2 secrets engine mounted at ``<namespace>/``; a
secret entry ``(namespace, name)`` is the KV path ``name`` in that mount.
"""
from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, TypeVar

from password_store.config import PasswordStoreSettings
from password_store.kernel.errors import (
    AlreadyExistsError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
)
from password_store.observability.logging import get_logger
from password_store.secrets.port import Namespace, NamespaceBackend, SecretBackend, SecretEntry

logger = get_logger(__name__)

T = TypeVar("T")
B = TypeVar("B", bound="_VaultBackend")

_CAS_MISMATCH = "check-and-set"
_PATH_IN_USE = "already in use"


def _require_hvac() -> Any:
    try:
        import hvac  # type: ignore[import-untyped]
        return hvac
    except ImportError as exc:
        raise ImportError("Install 'password-store[vault]' (hvac) to use the Vault adapter") from exc


class _VaultBackend:
    def __init__(self, url: str = "http://127.0.0.1:8200", token: str | None = None, **kwargs: Any) -> None:
        self._hvac = _require_hvac()
        self._client = self._hvac.Client(url=url, token=token, **kwargs)

    @classmethod
    def from_settings(cls: type[B], settings: PasswordStoreSettings, **kwargs: Any) -> B:
        """Client for ``settings.vault_url`` authenticated with ``settings.vault_token``."""
        return cls(url=settings.vault_url, token=settings.vault_token, **kwargs)

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(fn, *args))

    def _unexpected(self, exc: Exception) -> ExternalServiceError:
        return ExternalServiceError("vault", str(exc) or type(exc).__name__, cause=exc)


class VaultSecretBackend(_VaultBackend, SecretBackend):
    """Secret entries in KV v2 with check-and-set versioning."""

    async def get(self, namespace: str, name: str) -> SecretEntry:
        return await self._run(self._sync_get, namespace, name)

    def _sync_get(self, namespace: str, name: str) -> SecretEntry:
        exceptions = self._hvac.exceptions
        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=name, mount_point=namespace, raise_on_deleted_version=True
            )
        except exceptions.InvalidPath:
            raise NotFoundError("secret", f"{namespace}/{name}") from None
        except exceptions.VaultError as exc:
            raise self._unexpected(exc) from exc
        data: dict[str, str] = response["data"]["data"] or {}
        metadata: dict[str, Any] = response["data"].get("metadata") or {}
        custom = metadata.get("custom_metadata") or {}
        version = metadata.get("version")
        return SecretEntry(
            namespace=namespace,
            name=name,
            data=dict(data),
            type=custom.get("type", "Opaque"),
            version=None if version is None else str(version),
        )

    async def create(self, entry: SecretEntry) -> SecretEntry:
        return await self._run(self._sync_create, entry)

    def _sync_create(self, entry: SecretEntry) -> SecretEntry:
        exceptions = self._hvac.exceptions
        kv = self._client.secrets.kv.v2
        try:
            response = kv.create_or_update_secret(
                path=entry.name, secret=dict(entry.data), cas=0, mount_point=entry.namespace
            )
        except exceptions.InvalidRequest as exc:
            if _CAS_MISMATCH in str(exc):
                raise AlreadyExistsError("secret", str(entry)) from exc
            raise self._unexpected(exc) from exc
        except exceptions.VaultError as exc:
            raise self._unexpected(exc) from exc
        logger.debug("vault.secret_created", namespace=entry.namespace, name=entry.name)

        # Secret already written; the type tag is best-effort.
        try:
            kv.update_metadata(
                path=entry.name, mount_point=entry.namespace, custom_metadata={"type": entry.type}
            )
        except exceptions.VaultError as exc:
            logger.warning(
                "vault.secret_metadata_failed",
                namespace=entry.namespace,
                name=entry.name,
                error=type(exc).__name__,
            )
        return SecretEntry(
            namespace=entry.namespace,
            name=entry.name,
            data=dict(entry.data),
            type=entry.type,
            version=str(response["data"]["version"]),
        )

    async def update(self, entry: SecretEntry) -> SecretEntry:
        return await self._run(self._sync_update, entry)

    def _sync_update(self, entry: SecretEntry) -> SecretEntry:
        exceptions = self._hvac.exceptions
        cas = None if entry.version is None else int(entry.version)
        try:
            response = self._client.secrets.kv.v2.create_or_update_secret(
                path=entry.name, secret=dict(entry.data), cas=cas, mount_point=entry.namespace
            )
        except exceptions.InvalidRequest as exc:
            if _CAS_MISMATCH in str(exc):
                raise ConflictError("secret", str(entry)) from exc
            raise self._unexpected(exc) from exc
        except exceptions.VaultError as exc:
            raise self._unexpected(exc) from exc
        logger.debug("vault.secret_updated", namespace=entry.namespace, name=entry.name)
        return SecretEntry(
            namespace=entry.namespace,
            name=entry.name,
            data=dict(entry.data),
            type=entry.type,
            version=str(response["data"]["version"]),
        )

    async def delete(self, namespace: str, name: str) -> None:
        await self._run(self._sync_delete, namespace, name)

    def _sync_delete(self, namespace: str, name: str) -> None:
        exceptions = self._hvac.exceptions
        try:
            self._client.secrets.kv.v2.delete_metadata_and_all_versions(path=name, mount_point=namespace)
        except exceptions.InvalidPath:
            raise NotFoundError("secret", f"{namespace}/{name}") from None
        except exceptions.VaultError as exc:
            raise self._unexpected(exc) from exc


class VaultNamespaceBackend(_VaultBackend, NamespaceBackend):
    """Namespaces as KV v2 mounts."""

    async def get(self, name: str) -> Namespace:
        return await self._run(self._sync_get, name)

    def _sync_get(self, name: str) -> Namespace:
        try:
            response = self._client.sys.list_mounted_secrets_engines()
        except self._hvac.exceptions.VaultError as exc:
            raise self._unexpected(exc) from exc
        mounts = response.get("data", response)
        if f"{name}/" not in mounts:
            raise NotFoundError("namespace", name)
        return Namespace(name=name)

    async def create(self, name: str) -> Namespace:
        return await self._run(self._sync_create, name)

    def _sync_create(self, name: str) -> Namespace:
        exceptions = self._hvac.exceptions
        try:
            self._client.sys.enable_secrets_engine(backend_type="kv", path=name, options={"version": "2"})
        except exceptions.InvalidRequest as exc:
            if _PATH_IN_USE in str(exc):
                raise AlreadyExistsError("namespace", name) from exc
            raise self._unexpected(exc) from exc
        except exceptions.VaultError as exc:
            raise self._unexpected(exc) from exc
        logger.debug("vault.namespace_created", namespace=name)
        return Namespace(name=name)


__all__ = ["VaultNamespaceBackend", "VaultSecretBackend"]

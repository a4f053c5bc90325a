"""Redaction – wire a PasswordStore in front of existing stores."""
from __future__ import annotations

from typing import Iterable, MutableMapping

from password_store.adapters.vault import VaultNamespaceBackend, VaultSecretBackend
from password_store.config import PasswordStoreSettings
from password_store.kernel.errors import NotFoundError
from password_store.observability.logging import get_logger
from password_store.redaction.store import PasswordStore
from password_store.schema import SchemaRegistry, build_field_index
from password_store.secrets import NamespaceBackend, SecretBackend, SecretManager
from password_store.store import ResourceStore

logger = get_logger(__name__)


def install_password_store(
    stores: MutableMapping[str, ResourceStore],
    registry: SchemaRegistry,
    resource_types: Iterable[str],
    *,
    secrets: SecretBackend | None = None,
    namespaces: NamespaceBackend | None = None,
    settings: PasswordStoreSettings | None = None,
) -> PasswordStore:
    """Put one :class:`PasswordStore` in front of ``stores[t]`` for each *t*.

    The current store of every listed type becomes its delegate and is
    replaced in *stores* by the returned facade. Field trees are built here,
    once.

    Backends left out are the Vault ones built from *settings*
    (``vault_url`` and ``vault_token``).

    Raises:
        NotFoundError: a listed type has no schema or no store.
    """
    settings = settings or PasswordStoreSettings()
    if secrets is None:
        secrets = VaultSecretBackend.from_settings(settings)
    if namespaces is None:
        namespaces = VaultNamespaceBackend.from_settings(settings)
    resource_types = list(resource_types)
    delegates: dict[str, ResourceStore] = {}
    for resource_type in resource_types:
        if resource_type not in stores:
            raise NotFoundError("resource store", resource_type)
        delegates[resource_type] = stores[resource_type]

    fields = build_field_index(registry, resource_types)
    manager = SecretManager(secrets, namespaces, secret_type=settings.secret_type)
    password_store = PasswordStore(fields, delegates, manager, settings)
    for resource_type in resource_types:
        stores[resource_type] = password_store
    logger.info("password_store.installed", resource_types=resource_types)
    return password_store


__all__ = ["install_password_store"]

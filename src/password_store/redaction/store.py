"""Redaction – PasswordStore.

Wraps the per-type delegate stores. Password fields are moved into the
secret backend on ``create``/``update`` and resolved back on ``by_id``;
``list``, ``delete`` and ``watch`` pass through and return references as
stored.
"""
from __future__ import annotations

import copy
from typing import AsyncIterator, Mapping

from password_store.config import PasswordStoreSettings
from password_store.kernel.errors import MalformedReferenceError, NotFoundError
from password_store.observability.correlation import RequestContext
from password_store.observability.logging import get_logger
from password_store.redaction.naming import secret_name, secret_namespace
from password_store.redaction.walker import Direction, FieldMatch, walk
from password_store.schema import Composite
from password_store.secrets import SecretManager, decode, encode
from password_store.store import Payload, QueryOptions, ResourceStore

logger = get_logger(__name__)


class PasswordStore(ResourceStore):
    """:class:`ResourceStore` that keeps password fields out of the delegates.

    Args:
        fields: Read-only ``resource type -> field tree`` index, see
            :func:`~password_store.schema.build_field_index`.
        stores: Delegate store per resource type.
        secrets: Secret manager used for every backend round trip.
        settings: Namespaces and storage context.
    """

    def __init__(
        self,
        fields: Mapping[str, Composite],
        stores: Mapping[str, ResourceStore],
        secrets: SecretManager,
        settings: PasswordStoreSettings | None = None,
    ) -> None:
        self._fields = fields
        self._stores = dict(stores)
        self._secrets = secrets
        self._settings = settings or PasswordStoreSettings()

    @property
    def resource_types(self) -> list[str]:
        return sorted(self._stores)

    def _store(self, resource_type: str) -> ResourceStore:
        try:
            return self._stores[resource_type]
        except KeyError:
            raise NotFoundError("resource store", resource_type) from None

    def _tree(self, resource_type: str) -> Composite:
        return self._fields.get(resource_type) or Composite()

    # ------------------------------------------------------------------
    # ResourceStore
    # ------------------------------------------------------------------

    async def create(self, ctx: RequestContext, resource_type: str, data: Payload) -> Payload:
        store = self._store(resource_type)
        redacted = await self.replace_passwords(data, resource_type)
        return await store.create(ctx, resource_type, redacted)

    async def update(self, ctx: RequestContext, resource_type: str, data: Payload, id: str) -> Payload:
        store = self._store(resource_type)
        redacted = await self.replace_passwords(data, resource_type)
        return await store.update(ctx, resource_type, redacted, id)

    async def by_id(self, ctx: RequestContext, resource_type: str, id: str) -> Payload:
        data = await self._store(resource_type).by_id(ctx, resource_type, id)
        await self.assign_back(data, resource_type)
        return data

    async def list(
        self, ctx: RequestContext, resource_type: str, opt: QueryOptions | None = None
    ) -> list[Payload]:
        return await self._store(resource_type).list(ctx, resource_type, opt)

    async def delete(self, ctx: RequestContext, resource_type: str, id: str) -> Payload | None:
        return await self._store(resource_type).delete(ctx, resource_type, id)

    def watch(
        self, ctx: RequestContext, resource_type: str, opt: QueryOptions | None = None
    ) -> AsyncIterator[Payload]:
        return self._store(resource_type).watch(ctx, resource_type, opt)

    def context(self) -> str:
        return self._settings.storage_context

    # ------------------------------------------------------------------
    # Redaction / resolution
    # ------------------------------------------------------------------

    async def replace_passwords(self, data: Payload, resource_type: str) -> Payload:
        """Return a copy of *data* with every plaintext password replaced by its reference.

        *data* itself is never modified, so a failure part-way leaves
        nothing half-redacted behind.

        A value that references a stored secret in the resource's own
        namespace is not plaintext: its secret is read and stored again
        under the name the field maps to now. That covers payloads read
        back through :meth:`list` after array elements moved or ``name``
        changed. All such secrets are read before the first write, so
        swapped elements cannot overwrite each other.
        """
        redacted = copy.deepcopy(data)
        namespace = secret_namespace(redacted, self._settings.default_namespace)
        reserved = self._settings.reserved_namespace
        matches = walk(
            self._tree(resource_type),
            redacted,
            direction=Direction.WRITE,
            reserved_namespace=None if reserved == namespace else reserved,
        )
        pending: list[tuple[FieldMatch, str, str, str]] = []
        for match in matches:
            name = secret_name(redacted, resource_type, match)
            reference = encode(namespace, name)
            if match.value == reference:
                continue
            stored = await self._stored_plaintext(match.value, namespace)
            plaintext = match.value if stored is None else stored
            pending.append((match, name, reference, plaintext))

        for match, name, reference, plaintext in pending:
            await self._secrets.create_or_update(plaintext, name, namespace)
            match.assign(reference)
            logger.debug(
                "password_store.field_redacted",
                resource_type=resource_type,
                path=".".join(match.path),
                namespace=namespace,
                name=name,
            )
        return redacted

    async def _stored_plaintext(self, value: str, namespace: str) -> str | None:
        """Plaintext behind *value* if it names a secret stored in *namespace*."""
        try:
            ref_namespace, ref_name = decode(value)
        except MalformedReferenceError:
            return None
        if ref_namespace != namespace:
            return None
        try:
            return await self._secrets.get(ref_namespace, ref_name)
        except NotFoundError:
            return None

    async def assign_back(self, data: Payload, resource_type: str) -> None:
        """Replace every reference in *data* with its plaintext, in place.

        Values that are not references are left untouched.
        """
        for match in walk(self._tree(resource_type), data, direction=Direction.READ):
            try:
                namespace, name = decode(match.value)
            except MalformedReferenceError:
                continue
            match.assign(await self._secrets.get(namespace, name))


__all__ = ["PasswordStore"]

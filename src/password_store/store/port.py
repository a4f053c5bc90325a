"""Store – ResourceStore port.

Resource payloads are loosely-typed nested data: strings, numbers, booleans,
``None``, mappings and lists of mappings. Only their shape matters here.
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, AsyncIterator

from password_store.observability.correlation import RequestContext

Payload = dict[str, Any]


@dataclasses.dataclass(frozen=True)
class QueryOptions:
    """Equality filters on top-level payload keys plus an optional limit."""
    filters: dict[str, Any] = dataclasses.field(default_factory=dict)
    limit: int | None = None

    def matches(self, data: Payload) -> bool:
        return all(data.get(key) == value for key, value in self.filters.items())


class ResourceStore(abc.ABC):
    """Port: persist resources of any schema-described type.

    Every call receives the caller's :class:`RequestContext` and the
    ``resource_type`` (schema id) it operates on.
    """

    @abc.abstractmethod
    async def create(self, ctx: RequestContext, resource_type: str, data: Payload) -> Payload: ...

    @abc.abstractmethod
    async def update(self, ctx: RequestContext, resource_type: str, data: Payload, id: str) -> Payload: ...

    @abc.abstractmethod
    async def by_id(self, ctx: RequestContext, resource_type: str, id: str) -> Payload: ...

    @abc.abstractmethod
    async def list(
        self, ctx: RequestContext, resource_type: str, opt: QueryOptions | None = None
    ) -> list[Payload]: ...

    @abc.abstractmethod
    async def delete(self, ctx: RequestContext, resource_type: str, id: str) -> Payload | None: ...

    @abc.abstractmethod
    def watch(
        self, ctx: RequestContext, resource_type: str, opt: QueryOptions | None = None
    ) -> AsyncIterator[Payload]: ...

    @abc.abstractmethod
    def context(self) -> str:
        """Storage-scope tag of this store (e.g. ``"management"``)."""


__all__ = ["Payload", "QueryOptions", "ResourceStore"]

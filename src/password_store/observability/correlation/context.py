"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Caller-supplied context for a single store call.

    Passed as ``ctx`` to every :class:`~password_store.store.ResourceStore`
    operation and forwarded untouched to the delegate store.
    """
    correlation_id: str
    user_id: str | None = None
    project_id: str | None = None

    @classmethod
    def new(cls, user_id: str | None = None, project_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), user_id=user_id, project_id=project_id)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_password_store_request_ctx", default=None)


class CorrelationContext:
    """Ambient request context stored in a ``ContextVar`` for log enrichment."""

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)


__all__ = ["CorrelationContext", "RequestContext"]

"""Observability – log event redaction."""
from __future__ import annotations

from typing import Any

from password_store.kernel.security import MASK, SENSITIVE_KEYS, mask


class SensitiveFieldsFilter:
    """structlog processor that masks secret-bearing keys anywhere in an event."""

    REDACTED = MASK

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self.fields = frozenset(f.lower() for f in sensitive_fields or SENSITIVE_KEYS)

    def __call__(self, logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact(event_dict)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return mask(data, self.fields)


__all__ = ["SensitiveFieldsFilter"]

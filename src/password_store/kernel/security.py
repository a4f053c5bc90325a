"""Kernel – masking of secret-bearing keys.

Shared by error serialisation and the log redaction processor. A key is
sensitive when its lower-cased form ends with one of the configured names,
so ``clientSecret``, ``vault_token`` and ``users.password`` all match.
"""
from __future__ import annotations

from typing import Any, Mapping

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "apikey", "api_key",
    "authorization", "plaintext",
})
MASK = "[REDACTED]"


def is_sensitive(key: str, keys: frozenset[str] = SENSITIVE_KEYS) -> bool:
    return str(key).lower().endswith(tuple(keys))


def mask(data: Mapping[str, Any], keys: frozenset[str] = SENSITIVE_KEYS) -> dict[str, Any]:
    """Copy of *data* with sensitive values replaced by :data:`MASK`, at any depth."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if is_sensitive(key, keys):
            result[key] = MASK
        elif isinstance(value, Mapping):
            result[key] = mask(value, keys)
        elif isinstance(value, list):
            result[key] = [mask(item, keys) if isinstance(item, Mapping) else item for item in value]
        else:
            result[key] = value
    return result


__all__ = ["MASK", "SENSITIVE_KEYS", "is_sensitive", "mask"]

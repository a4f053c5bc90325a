"""Secrets – reference codec.

A redacted password field holds ``"<namespace>:<name>"`` instead of its
plaintext. Only the first colon separates the two parts.
"""
from __future__ import annotations

from password_store.kernel.errors import MalformedReferenceError

SEPARATOR = ":"


def encode(namespace: str, name: str) -> str:
    return f"{namespace}{SEPARATOR}{name.lower()}"


def decode(ref: str) -> tuple[str, str]:
    """Split *ref* into ``(namespace, name)``.

    Raises:
        MalformedReferenceError: *ref* has no colon or an empty part.
    """
    parts = ref.split(SEPARATOR, 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedReferenceError()
    return parts[0], parts[1]


__all__ = ["SEPARATOR", "decode", "encode"]

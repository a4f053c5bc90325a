"""Redaction – derive where a password field's secret lives."""
from __future__ import annotations

from typing import Any, Mapping

from password_store.redaction.walker import FieldMatch


def secret_name(data: Mapping[str, Any], resource_type: str, match: FieldMatch) -> str:
    """``<name>-<field>``, falling back to the resource type for ``<name>``.

    Matches found inside arrays get one ``-<index>`` suffix per array level
    so each element is stored separately.
    """
    base = data.get("name")
    if base is None or base == "":
        base = resource_type
    parts = [str(base), match.path[-1]]
    parts.extend(str(i) for i in match.indices)
    return "-".join(parts).lower()


def secret_namespace(data: Mapping[str, Any], default: str) -> str:
    """Namespace from a ``"<namespace>:<name>"`` or ``"<namespace>"`` payload id."""
    raw = data.get("id")
    if raw is None:
        return default
    parts = str(raw).split(":")
    if len(parts) == 2 and parts[0]:
        return parts[0]
    if len(parts) == 1 and parts[0]:
        return parts[0]
    return default


__all__ = ["secret_name", "secret_namespace"]

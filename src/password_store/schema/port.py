"""Schema – ResourceSchema and the SchemaRegistry port."""
from __future__ import annotations

import abc
import dataclasses
import types
from typing import Mapping

PASSWORD_TYPE = "password"

_ARRAY_PREFIX = "array["


def unwrap_array(field_type: str) -> str:
    """Strip every ``array[...]`` wrapper: ``array[array[user]]`` -> ``user``."""
    while field_type.startswith(_ARRAY_PREFIX) and field_type.endswith("]"):
        field_type = field_type[len(_ARRAY_PREFIX):-1]
    return field_type


@dataclasses.dataclass(frozen=True)
class ResourceField:
    """Type descriptor of one schema field.

    ``type`` is a scalar marker (``string``, ``password``, ...), the name of
    another schema, or ``array[<type>]``.
    """
    type: str


@dataclasses.dataclass(frozen=True)
class ResourceSchema:
    """Field name -> descriptor map for one resource type."""
    id: str
    resource_fields: Mapping[str, ResourceField] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "resource_fields", types.MappingProxyType(dict(self.resource_fields)))


class SchemaRegistry(abc.ABC):
    """Port: look up schemas by type name."""

    @abc.abstractmethod
    def lookup(self, type_name: str) -> ResourceSchema | None:
        """Return the schema for *type_name*, or ``None`` if it is not a composite type."""


__all__ = [
    "PASSWORD_TYPE",
    "ResourceField",
    "ResourceSchema",
    "SchemaRegistry",
    "unwrap_array",
]

"""Schema – password field trees.

A field tree is the schema of one resource type pruned down to the paths
that lead to ``password`` fields. Nested and ``array[...]`` composite fields
are followed; every other scalar is dropped, as is any composite that holds
no password below it::

    {"name": "string", "auth": "basicAuth", "users": "array[user]"}
    basicAuth = {"username": "string", "password": "password"}
    user      = {"login": "string", "secret": "password"}

    -> Composite({"auth": Composite({"password": Leaf()}),
                  "users": Composite({"secret": Leaf()})})

Trees are built once at startup and never mutated, so a single index is
shared by every request without locking.
"""
from __future__ import annotations

import dataclasses
import types
from typing import Iterable, Mapping, Union

from password_store.kernel.errors import NotFoundError
from password_store.observability.logging import get_logger
from password_store.schema.port import PASSWORD_TYPE, ResourceSchema, SchemaRegistry, unwrap_array

logger = get_logger(__name__)

SENTINEL = ".."


@dataclasses.dataclass(frozen=True)
class Leaf:
    """Marks a password field."""

    def to_dict(self) -> str:
        return SENTINEL


@dataclasses.dataclass(frozen=True)
class Composite:
    """A nested (or array-of) composite field with password fields below it."""

    children: Mapping[str, "FieldTree"] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        ordered = {key: self.children[key] for key in sorted(self.children)}
        object.__setattr__(self, "children", types.MappingProxyType(ordered))

    def __bool__(self) -> bool:
        return bool(self.children)

    def to_dict(self) -> dict[str, object]:
        """Render as nested dicts with :data:`SENTINEL` at every leaf."""
        return {key: child.to_dict() for key, child in self.children.items()}


FieldTree = Union[Leaf, Composite]


def build_field_tree(schema: ResourceSchema, registry: SchemaRegistry) -> Composite:
    """Return the pruned password tree for *schema*."""
    return _build(schema, registry, frozenset({schema.id}))


def _build(schema: ResourceSchema, registry: SchemaRegistry, seen: frozenset[str]) -> Composite:
    children: dict[str, FieldTree] = {}
    for name, field in schema.resource_fields.items():
        field_type = unwrap_array(field.type)
        nested = registry.lookup(field_type)
        if nested is not None:
            # Self-referencing types are cut at the repeat.
            if nested.id in seen:
                continue
            subtree = _build(nested, registry, seen | {nested.id})
            if subtree:
                children[name] = subtree
        elif field.type == PASSWORD_TYPE:
            children[name] = Leaf()
    return Composite(children)


def build_field_index(registry: SchemaRegistry, type_names: Iterable[str]) -> Mapping[str, Composite]:
    """Build the read-only ``type name -> field tree`` index.

    Raises:
        NotFoundError: a type name is unknown to *registry*.
    """
    index: dict[str, Composite] = {}
    for type_name in type_names:
        schema = registry.lookup(type_name)
        if schema is None:
            raise NotFoundError("schema", type_name)
        index[schema.id] = build_field_tree(schema, registry)
        logger.debug("password_store.field_tree_built", resource_type=schema.id, tree=index[schema.id].to_dict())
    return types.MappingProxyType(index)


__all__ = [
    "Composite",
    "FieldTree",
    "Leaf",
    "SENTINEL",
    "build_field_index",
    "build_field_tree",
]

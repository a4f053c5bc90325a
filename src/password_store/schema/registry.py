"""Schema – InMemorySchemaRegistry."""
from __future__ import annotations

from typing import Any, Mapping

from password_store.schema.port import ResourceField, ResourceSchema, SchemaRegistry


class InMemorySchemaRegistry(SchemaRegistry):
    """Dict-backed :class:`SchemaRegistry`.

    Usage::

        registry = InMemorySchemaRegistry.from_dict({
            "githubConfig": {"name": "string", "clientSecret": "password"},
        })
    """

    def __init__(self, schemas: list[ResourceSchema] | None = None) -> None:
        self._schemas: dict[str, ResourceSchema] = {}
        for schema in schemas or []:
            self.register(schema)

    @classmethod
    def from_dict(cls, definitions: Mapping[str, Mapping[str, Any]]) -> "InMemorySchemaRegistry":
        """Build from ``{type_name: {field_name: type_marker}}``.

        A field value may also be a mapping with a ``"type"`` key.
        """
        registry = cls()
        for type_name, fields in definitions.items():
            resource_fields = {
                name: ResourceField(spec["type"] if isinstance(spec, Mapping) else spec)
                for name, spec in fields.items()
            }
            registry.register(ResourceSchema(id=type_name, resource_fields=resource_fields))
        return registry

    def register(self, schema: ResourceSchema) -> "InMemorySchemaRegistry":
        self._schemas[schema.id] = schema
        return self

    def lookup(self, type_name: str) -> ResourceSchema | None:
        return self._schemas.get(type_name)

    def type_names(self) -> list[str]:
        return sorted(self._schemas)


__all__ = ["InMemorySchemaRegistry"]

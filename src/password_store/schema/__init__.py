"""Schema – resource schemas, the registry port and password field trees."""
from password_store.schema.field_tree import (
    SENTINEL,
    Composite,
    FieldTree,
    Leaf,
    build_field_index,
    build_field_tree,
)
from password_store.schema.port import (
    PASSWORD_TYPE,
    ResourceField,
    ResourceSchema,
    SchemaRegistry,
    unwrap_array,
)
from password_store.schema.registry import InMemorySchemaRegistry

__all__ = [
    "Composite",
    "FieldTree",
    "InMemorySchemaRegistry",
    "Leaf",
    "PASSWORD_TYPE",
    "ResourceField",
    "ResourceSchema",
    "SENTINEL",
    "SchemaRegistry",
    "build_field_index",
    "build_field_tree",
    "unwrap_array",
]

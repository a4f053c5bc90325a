"""Unit tests for schema field trees."""

from __future__ import annotations

import pytest

from password_store.kernel.errors import NotFoundError
from password_store.schema import (
    SENTINEL,
    Composite,
    InMemorySchemaRegistry,
    Leaf,
    ResourceField,
    ResourceSchema,
    build_field_index,
    build_field_tree,
    unwrap_array,
)


def _registry() -> InMemorySchemaRegistry:
    return InMemorySchemaRegistry.from_dict({
        "githubConfig": {"name": "string", "clientId": "string", "clientSecret": "password"},
        "sourceCodeCredential": {"name": "string", "auth": "basicAuth", "users": "array[user]"},
        "basicAuth": {"username": "string", "password": "password"},
        "user": {"login": "string", "secret": "password", "enabled": "boolean"},
        "plainConfig": {"name": "string", "labels": "map[string]", "owner": "user2"},
        "user2": {"login": "string"},
    })


# ---------------------------------------------------------------------------
# unwrap_array
# ---------------------------------------------------------------------------


class TestUnwrapArray:
    def test_scalar_unchanged(self) -> None:
        assert unwrap_array("string") == "string"

    def test_single_array(self) -> None:
        assert unwrap_array("array[user]") == "user"

    def test_nested_array(self) -> None:
        assert unwrap_array("array[array[user]]") == "user"


# ---------------------------------------------------------------------------
# InMemorySchemaRegistry
# ---------------------------------------------------------------------------


class TestInMemorySchemaRegistry:
    def test_lookup_known(self) -> None:
        schema = _registry().lookup("basicAuth")
        assert schema is not None
        assert schema.resource_fields["password"] == ResourceField("password")

    def test_lookup_unknown_returns_none(self) -> None:
        assert _registry().lookup("string") is None

    def test_from_dict_accepts_descriptor_mappings(self) -> None:
        registry = InMemorySchemaRegistry.from_dict({"t": {"pw": {"type": "password"}}})
        assert registry.lookup("t").resource_fields["pw"].type == "password"  # type: ignore[union-attr]

    def test_schema_fields_are_read_only(self) -> None:
        schema = ResourceSchema(id="t", resource_fields={"a": ResourceField("string")})
        with pytest.raises(TypeError):
            schema.resource_fields["b"] = ResourceField("string")  # type: ignore[index]

    def test_type_names_sorted(self) -> None:
        assert _registry().type_names()[0] == "basicAuth"


# ---------------------------------------------------------------------------
# build_field_tree
# ---------------------------------------------------------------------------


class TestBuildFieldTree:
    def test_top_level_password(self) -> None:
        registry = _registry()
        tree = build_field_tree(registry.lookup("githubConfig"), registry)  # type: ignore[arg-type]
        assert tree == Composite({"clientSecret": Leaf()})

    def test_nested_and_array_composites(self) -> None:
        registry = _registry()
        tree = build_field_tree(registry.lookup("sourceCodeCredential"), registry)  # type: ignore[arg-type]
        assert tree.to_dict() == {
            "auth": {"password": SENTINEL},
            "users": {"secret": SENTINEL},
        }

    def test_composites_without_passwords_are_pruned(self) -> None:
        registry = _registry()
        tree = build_field_tree(registry.lookup("plainConfig"), registry)  # type: ignore[arg-type]
        assert tree == Composite()
        assert not tree

    def test_array_of_password_is_not_a_leaf(self) -> None:
        registry = InMemorySchemaRegistry.from_dict({"t": {"pws": "array[password]"}})
        assert build_field_tree(registry.lookup("t"), registry) == Composite()  # type: ignore[arg-type]

    def test_children_sorted_by_key(self) -> None:
        registry = InMemorySchemaRegistry.from_dict({"t": {"zeta": "password", "alpha": "password"}})
        tree = build_field_tree(registry.lookup("t"), registry)  # type: ignore[arg-type]
        assert list(tree.children) == ["alpha", "zeta"]

    def test_children_are_read_only(self) -> None:
        registry = _registry()
        tree = build_field_tree(registry.lookup("githubConfig"), registry)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            tree.children["other"] = Leaf()  # type: ignore[index]

    def test_self_referencing_type_terminates(self) -> None:
        registry = InMemorySchemaRegistry.from_dict({
            "node": {"secret": "password", "children": "array[node]"},
        })
        tree = build_field_tree(registry.lookup("node"), registry)  # type: ignore[arg-type]
        assert tree.to_dict() == {"secret": SENTINEL}

    def test_deterministic(self) -> None:
        registry = _registry()
        schema = registry.lookup("sourceCodeCredential")
        assert build_field_tree(schema, registry) == build_field_tree(schema, registry)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# build_field_index
# ---------------------------------------------------------------------------


class TestBuildFieldIndex:
    def test_indexes_requested_types(self) -> None:
        index = build_field_index(_registry(), ["githubConfig", "plainConfig"])
        assert set(index) == {"githubConfig", "plainConfig"}
        assert index["githubConfig"] == Composite({"clientSecret": Leaf()})

    def test_index_is_read_only(self) -> None:
        index = build_field_index(_registry(), ["githubConfig"])
        with pytest.raises(TypeError):
            index["x"] = Composite()  # type: ignore[index]

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(NotFoundError):
            build_field_index(_registry(), ["missingType"])

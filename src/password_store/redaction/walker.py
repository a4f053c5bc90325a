"""Redaction – match a field tree against a resource payload.

The walk follows keys present in both the tree and the payload, sorted at
each level. Nested mappings extend the path by their key; lists of mappings
are walked element by element under the *same* path, so every element of
``users`` reports ``("users", "password")``. The element indices are kept
on the match separately and never folded into the path.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, MutableMapping

from password_store.observability.logging import get_logger
from password_store.schema import Composite, FieldTree, Leaf
from password_store.secrets.reference import SEPARATOR

logger = get_logger(__name__)


class Direction(enum.Enum):
    WRITE = "write"
    READ = "read"


@dataclasses.dataclass(frozen=True)
class FieldMatch:
    """One non-empty password value found in a payload."""

    path: tuple[str, ...]
    value: str
    indices: tuple[int, ...] = ()
    _container: MutableMapping[str, Any] | None = dataclasses.field(
        default=None, repr=False, compare=False
    )

    def assign(self, value: str) -> None:
        """Overwrite the matched value in the mapping it was read from."""
        if self._container is None:
            raise RuntimeError("match is not bound to a payload")
        self._container[self.path[-1]] = value


def walk(
    tree: Composite,
    data: MutableMapping[str, Any],
    *,
    direction: Direction = Direction.WRITE,
    reserved_namespace: str | None = None,
) -> list[FieldMatch]:
    """Collect every present password value of *data* described by *tree*.

    On a :attr:`Direction.WRITE` walk, values that already reference
    *reserved_namespace* are skipped so they are never wrapped twice.
    """
    matches: list[FieldMatch] = []
    _walk(tree, data, (), (), direction, reserved_namespace, matches)
    return matches


def _walk(
    tree: Composite,
    data: MutableMapping[str, Any],
    path: tuple[str, ...],
    indices: tuple[int, ...],
    direction: Direction,
    reserved_namespace: str | None,
    matches: list[FieldMatch],
) -> None:
    for key, node in tree.children.items():
        if key not in data:
            continue
        child_path = path + (key,)
        _visit(node, data, key, child_path, indices, direction, reserved_namespace, matches)


def _visit(
    node: FieldTree,
    data: MutableMapping[str, Any],
    key: str,
    path: tuple[str, ...],
    indices: tuple[int, ...],
    direction: Direction,
    reserved_namespace: str | None,
    matches: list[FieldMatch],
) -> None:
    value = data[key]
    if isinstance(node, Leaf):
        if value is None or isinstance(value, (dict, list)):
            return
        text = value if isinstance(value, str) else str(value)
        if not text:
            return
        if direction is Direction.WRITE and reserved_namespace is not None:
            parts = text.split(SEPARATOR, 1)
            if len(parts) == 2 and parts[0] == reserved_namespace:
                logger.debug("password_store.reference_skipped", path=".".join(path))
                return
        matches.append(FieldMatch(path=path, value=text, indices=indices, _container=data))
        return

    if isinstance(value, dict):
        _walk(node, value, path, indices, direction, reserved_namespace, matches)
    elif isinstance(value, list):
        for i, element in enumerate(value):
            if isinstance(element, dict):
                _walk(node, element, path, indices + (i,), direction, reserved_namespace, matches)


__all__ = ["Direction", "FieldMatch", "walk"]

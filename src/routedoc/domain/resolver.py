"""Dependency resolution — transitive closure of the types a root references.

Traversal is depth-first over an explicit stack of field iterators, so
self-referencing and mutually-referencing structs terminate regardless
of recursion limits. A reference is expanded only the first time its
name is seen.

Pointer references keep their marker in the resolved key (``*User``)
while the registry is searched without it (``User``), so ``User`` and
``*User`` are tracked as separate entries for the same definition.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import assert_never

from routedoc.domain.registry import TypeRegistry
from routedoc.domain.types import (
    POINTER_MARKER,
    ArrayType,
    InterfaceType,
    MapType,
    PointerType,
    PrimitiveType,
    StructType,
    TypeDef,
)


class ResolvedSet(Mapping[str, TypeDef]):
    """Name-keyed definitions reachable from one root, in discovery order."""

    def __init__(self, entries: dict[str, TypeDef] | None = None) -> None:
        self._entries: dict[str, TypeDef] = dict(entries or {})

    def __getitem__(self, name: str) -> TypeDef:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResolvedSet({list(self._entries)!r})"


def search_name(name: str) -> str:
    """Strip one leading pointer marker to get the registry key."""
    if name.startswith(POINTER_MARKER):
        return name[len(POINTER_MARKER) :]
    return name


def _references(definition: TypeDef) -> Iterator[TypeDef]:
    """Yield the definitions *definition* points at that need resolving."""
    match definition:
        case PointerType():
            yield definition.target
        case StructType():
            for field in definition.fields:
                yield from _field_references(field.type)
        case PrimitiveType() | MapType() | ArrayType() | InterfaceType():
            return
        case _:
            assert_never(definition)


def _field_references(field_type: TypeDef) -> Iterator[TypeDef]:
    match field_type:
        case StructType() | PointerType():
            yield field_type
        case MapType():
            if not isinstance(field_type.value, PrimitiveType):
                yield field_type.value
        case ArrayType():
            if not isinstance(field_type.element, PrimitiveType):
                yield field_type.element
        case PrimitiveType() | InterfaceType():
            return
        case _:
            assert_never(field_type)


def resolve(root: TypeDef | None, registry: TypeRegistry) -> ResolvedSet:
    """Collect *root* and every registered type reachable from it.

    Only a named struct root produces entries; anything else yields an
    empty set, which callers render as no documentation body.
    """
    if root is None or not root.name or not isinstance(root, StructType):
        return ResolvedSet()

    resolved: dict[str, TypeDef] = {root.name: root}
    stack: list[Iterator[TypeDef]] = [_references(root)]
    while stack:
        reference = next(stack[-1], None)
        if reference is None:
            stack.pop()
            continue
        if reference.name in resolved:
            continue
        found = registry.lookup(search_name(reference.name))
        if found is None:
            continue
        resolved[reference.name] = found
        stack.append(_references(found))
    return ResolvedSet(resolved)

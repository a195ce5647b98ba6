"""TypeRegistry — name to definition lookup for every declared type.

Built once per run from a service description and never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from routedoc.domain.types import TypeDef

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Read-only mapping of exact type name to definition.

    A later declaration with the same name replaces the earlier one;
    such names are listed once each in ``duplicates``.
    """

    def __init__(self, definitions: Iterable[TypeDef] = ()) -> None:
        types: dict[str, TypeDef] = {}
        duplicates: dict[str, None] = {}
        for definition in definitions:
            if definition.name in types:
                logger.debug("Duplicate type declaration: %s", definition.name)
                duplicates[definition.name] = None
            types[definition.name] = definition
        self._types = MappingProxyType(types)
        self.duplicates: tuple[str, ...] = tuple(duplicates)

    def lookup(self, name: str) -> TypeDef | None:
        """Return the definition registered under *name*, or None."""
        return self._types.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

"""Parse Go-style type expressions into type-definition models.

Supported forms::

    int  string  time.Time      primitive or struct reference
    *User                       pointer
    []User  [4]byte             array
    map[string][]*User          map
    interface{}  any            interface

Builtin scalar names become :class:`PrimitiveType`; any other identifier
is a :class:`StructType` reference (name only, fields come from the
registry).
"""

from __future__ import annotations

import re

from routedoc.domain.errors import TypeExpressionError
from routedoc.domain.types import (
    POINTER_MARKER,
    ArrayType,
    InterfaceType,
    MapType,
    PointerType,
    PrimitiveType,
    StructType,
)

BUILTIN_PRIMITIVES: frozenset[str] = frozenset(
    {
        "bool",
        "string",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
        "byte",
        "rune",
        "float32",
        "float64",
        "complex64",
        "complex128",
    }
)

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)?")
_FIXED_LEN = re.compile(r"\[(\d*)\]")

TypeModel = PrimitiveType | StructType | PointerType | MapType | ArrayType | InterfaceType


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def fail(self, reason: str) -> TypeExpressionError:
        return TypeExpressionError(self.text, f"{reason} at offset {self.pos}")

    def expect(self, token: str) -> None:
        if not self.text.startswith(token, self.pos):
            raise self.fail(f"expected {token!r}")
        self.pos += len(token)

    def parse(self) -> TypeModel:
        text = self.text
        if text.startswith(POINTER_MARKER, self.pos):
            self.pos += len(POINTER_MARKER)
            return PointerType(target=self.parse())
        if text.startswith("map[", self.pos):
            self.pos += len("map[")
            key = self.parse()
            self.expect("]")
            return MapType(key=key, value=self.parse())
        if text.startswith("[", self.pos):
            match = _FIXED_LEN.match(text, self.pos)
            if match is None:
                raise self.fail("unterminated array length")
            self.pos = match.end()
            length = int(match.group(1)) if match.group(1) else None
            return ArrayType(element=self.parse(), length=length)
        if text.startswith("interface{}", self.pos):
            self.pos += len("interface{}")
            return InterfaceType()
        match = _IDENT.match(text, self.pos)
        if match is None:
            raise self.fail("expected a type name")
        self.pos = match.end()
        name = match.group(0)
        if name in BUILTIN_PRIMITIVES:
            return PrimitiveType(name=name)
        if name == "any":
            return InterfaceType(name="any")
        return StructType(name=name)


def parse_type_expression(expression: str) -> TypeModel:
    """Parse *expression* into a type-definition model.

    Raises:
        TypeExpressionError: If the expression is empty, malformed, or has
            trailing characters.
    """
    text = expression.strip()
    if not text:
        raise TypeExpressionError(expression, "empty expression")
    parser = _Parser(text)
    result = parser.parse()
    if parser.pos != len(text):
        raise parser.fail("unexpected trailing characters")
    return result

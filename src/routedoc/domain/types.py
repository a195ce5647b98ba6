"""Type definitions, routes, and the service description.

A type definition is one of a closed set of variants, discriminated by
``kind``:

- ``primitive`` — builtin scalar, a leaf with only a name
- ``struct`` — a name plus ordered fields
- ``pointer`` — wraps a target definition
- ``map`` — key and value definitions
- ``array`` — element definition, with an optional fixed length
- ``interface`` — opaque, never descended into

Pointer, map, and array names are derived from their parts so that
``name`` is always the type as written (``*User``, ``[]User``, ``[4]byte``,
``map[string]User``).

All models are frozen.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, computed_field, field_validator

POINTER_MARKER = "*"


class TypeKind(StrEnum):
    """Discriminator values for the type-definition variants."""

    PRIMITIVE = "primitive"
    STRUCT = "struct"
    POINTER = "pointer"
    MAP = "map"
    ARRAY = "array"
    INTERFACE = "interface"


def coerce_type(value: Any) -> Any:
    """Turn raw input into a type-definition model.

    Accepts a model instance, a mapping with a ``kind`` key (defaults to
    ``struct``), or a type-expression string such as ``map[string]*User``.
    """
    if isinstance(value, str):
        from routedoc.domain.expressions import parse_type_expression

        return parse_type_expression(value)
    if isinstance(value, dict):
        kind = value.get("kind", TypeKind.STRUCT)
        model = _MODELS_BY_KIND.get(kind)
        if model is None:
            raise ValueError(f"unknown type kind: {kind!r}")
        return model.model_validate(value)
    return value


class PrimitiveType(BaseModel):
    """Builtin scalar type."""

    model_config = {"frozen": True}

    kind: Literal["primitive"] = "primitive"
    name: str


class InterfaceType(BaseModel):
    """Opaque type (``interface{}``, ``any``, or anything unrecognised)."""

    model_config = {"frozen": True}

    kind: Literal["interface"] = "interface"
    name: str = "interface{}"


class StructType(BaseModel):
    """Named aggregate with ordered fields.

    A struct with no fields is also how field types *reference* a
    declared struct: the full definition lives in the registry.
    """

    model_config = {"frozen": True}

    kind: Literal["struct"] = "struct"
    name: str
    fields: tuple[FieldDef, ...] = ()


class PointerType(BaseModel):
    """Pointer to a target definition."""

    model_config = {"frozen": True}

    kind: Literal["pointer"] = "pointer"
    target: TypeDef

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return f"{POINTER_MARKER}{self.target.name}"


class MapType(BaseModel):
    """Map from a (primitive) key to a value definition."""

    model_config = {"frozen": True}

    kind: Literal["map"] = "map"
    key: TypeDef
    value: TypeDef

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return f"map[{self.key.name}]{self.value.name}"


class ArrayType(BaseModel):
    """Slice of an element definition, or a fixed-size array when ``length`` is set."""

    model_config = {"frozen": True}

    kind: Literal["array"] = "array"
    element: TypeDef
    length: int | None = Field(default=None, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        size = "" if self.length is None else str(self.length)
        return f"[{size}]{self.element.name}"


TypeDef = Annotated[
    PrimitiveType | StructType | PointerType | MapType | ArrayType | InterfaceType,
    BeforeValidator(coerce_type),
]

_MODELS_BY_KIND: dict[str, type[BaseModel]] = {
    TypeKind.PRIMITIVE: PrimitiveType,
    TypeKind.STRUCT: StructType,
    TypeKind.POINTER: PointerType,
    TypeKind.MAP: MapType,
    TypeKind.ARRAY: ArrayType,
    TypeKind.INTERFACE: InterfaceType,
}


class FieldDef(BaseModel):
    """One struct field. An empty ``name`` marks an embedded field."""

    model_config = {"frozen": True}

    name: str = ""
    type: TypeDef
    tag: str = ""
    comment: str = ""


class Route(BaseModel):
    """One documented endpoint.

    ``doc`` is the annotation mapping; its ``title`` key is reserved.
    """

    model_config = {"frozen": True}

    method: str
    path: str
    handler: str = ""
    request_type: TypeDef | None = Field(
        default=None, validation_alias=AliasChoices("request_type", "request")
    )
    response_type: TypeDef | None = Field(
        default=None, validation_alias=AliasChoices("response_type", "response")
    )
    doc: dict[str, str] = Field(default_factory=dict)

    @field_validator("request_type", "response_type", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("doc", mode="before")
    @classmethod
    def _stringify_doc(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value

    @property
    def request_type_name(self) -> str:
        return self.request_type.name if self.request_type is not None else ""

    @property
    def response_type_name(self) -> str:
        return self.response_type.name if self.response_type is not None else ""


class ServiceDescription(BaseModel):
    """Parsed API service: declared types plus routes in declaration order."""

    model_config = {"frozen": True}

    name: str = ""
    types: tuple[TypeDef, ...] = ()
    routes: tuple[Route, ...] = ()


for _model in (StructType, PointerType, MapType, ArrayType, FieldDef, Route, ServiceDescription):
    _model.model_rebuild()

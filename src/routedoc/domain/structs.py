"""Struct rendering — resolved definitions to Go-style struct text.

Output for one definition::

    type User struct {
    	ID int `json:"id"` // user id
    	Name string `json:"name"`
    }

Nested struct fields are rendered as a reference to the type name, never
inlined; the referenced type gets its own block from the resolved set.
"""

from __future__ import annotations

from collections.abc import Mapping

from routedoc.domain.errors import (
    MalformedTypeError,
    RouteDocError,
    TypeGenerationError,
    UnsupportedTypeKindError,
)
from routedoc.domain.types import FieldDef, StructType, TypeDef, TypeKind

DEFAULT_INDENT = "\t"
DEFAULT_COMMENT_MARKER = "//"
DEFAULT_CODE_LANGUAGE = "golang"


def title(name: str) -> str:
    """Upper-case the first character only (exported identifier form)."""
    return name[:1].upper() + name[1:]


def normalize_comment(comment: str, marker: str = DEFAULT_COMMENT_MARKER) -> str:
    """Return *comment* with exactly one leading *marker*, or ``""``.

    ``"// user id"`` and ``" user id"`` both become ``"// user id"``.
    """
    text = comment.strip()
    while text.startswith(marker):
        text = text[len(marker) :].lstrip()
    if not text:
        return ""
    return f"{marker} {text}"


def render_field(
    field: FieldDef,
    *,
    indent: str = DEFAULT_INDENT,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> str:
    """Render one field line; empty parts (embedded name, tag) are omitted."""
    parts = [title(field.name), field.type.name, field.tag.strip()]
    parts.append(normalize_comment(field.comment, comment_marker))
    return indent + " ".join(part for part in parts if part)


def render_struct(
    definition: TypeDef,
    *,
    indent: str = DEFAULT_INDENT,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> str:
    """Render a single struct definition.

    Raises:
        UnsupportedTypeKindError: *definition* is not a struct.
        MalformedTypeError: *definition* claims ``struct`` but is not one.
    """
    if definition.kind != TypeKind.STRUCT:
        raise UnsupportedTypeKindError(definition.name, definition.kind)
    if not isinstance(definition, StructType):
        raise MalformedTypeError(definition.name)

    lines = [f"type {title(definition.name)} struct {{"]
    for field in definition.fields:
        if not isinstance(field, FieldDef):
            raise MalformedTypeError(definition.name, f"invalid field {field!r}")
        lines.append(render_field(field, indent=indent, comment_marker=comment_marker))
    lines.append("}")
    return "\n".join(lines)


def render_types(
    resolved: Mapping[str, TypeDef],
    *,
    indent: str = DEFAULT_INDENT,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> str:
    """Render every resolved definition in order, separated by a blank line.

    Raises:
        TypeGenerationError: Rendering one of the definitions failed; the
            message names the offending type.
    """
    blocks: list[str] = []
    for definition in resolved.values():
        try:
            blocks.append(
                render_struct(definition, indent=indent, comment_marker=comment_marker)
            )
        except RouteDocError as exc:
            raise TypeGenerationError(definition.name, exc) from exc
    return "\n\n".join(blocks)


def fence(body: str, language: str = DEFAULT_CODE_LANGUAGE) -> str:
    """Wrap *body* in a fenced code block, or return ``""`` when empty."""
    if not body:
        return ""
    return f"\n\n```{language}\n{body}\n```\n"

"""Exception hierarchy for routedoc.

Domain code raises these; the service layer converts them into a failed
:class:`~routedoc.services.result.ServiceResult`.
"""

from __future__ import annotations


class RouteDocError(Exception):
    """Base class for all routedoc errors."""


class TypeExpressionError(RouteDocError, ValueError):
    """A type expression string could not be parsed.

    Also a ``ValueError`` so pydantic validators report it as a validation
    error when it occurs while loading a description.
    """

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"invalid type expression {expression!r}: {reason}")
        self.expression = expression


class UnsupportedTypeKindError(RouteDocError):
    """A type is not a struct where a struct is required."""

    def __init__(self, type_name: str, kind: str) -> None:
        super().__init__(f"unsupported struct type: {type_name} ({kind})")
        self.type_name = type_name
        self.kind = kind


class MalformedTypeError(RouteDocError):
    """A type claims to be a struct but cannot be read as one."""

    def __init__(self, type_name: str, reason: str = "not a struct definition") -> None:
        super().__init__(f"malformed struct type {type_name}: {reason}")
        self.type_name = type_name


class TypeGenerationError(RouteDocError):
    """Rendering a resolved type failed. Wraps the underlying error."""

    def __init__(self, type_name: str, cause: RouteDocError) -> None:
        super().__init__(f"Type {type_name} generate error: {cause}")
        self.type_name = type_name


class UnknownTypeError(RouteDocError):
    """A route references a type name that is not declared."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"unknown type: {type_name}")
        self.type_name = type_name


class DescriptionError(RouteDocError):
    """The service description could not be read or validated."""


class TemplateError(RouteDocError):
    """The documentation template could not be loaded or rendered."""

"""DocService — assemble route documentation from a service description.

Per route, in declaration order: resolve and render the request type,
then the response type, build the template record, render the template.
The first failure aborts the whole document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jinja2
import structlog

from routedoc.config.models import RenderConfig
from routedoc.domain.errors import (
    RouteDocError,
    TemplateError,
    TypeGenerationError,
    UnknownTypeError,
)
from routedoc.domain.registry import TypeRegistry
from routedoc.domain.resolver import ResolvedSet, resolve
from routedoc.domain.structs import fence, render_types
from routedoc.domain.types import StructType
from routedoc.services.result import ServiceResult

if TYPE_CHECKING:
    from routedoc.domain.types import Route, ServiceDescription, TypeDef

log = structlog.get_logger(__name__)

TITLE_KEY = "title"
MISSING_TYPE = "-"


def _error_code(exc: RouteDocError) -> str:
    if isinstance(exc, TypeGenerationError):
        return "TYPE_GENERATION_ERROR"
    if isinstance(exc, UnknownTypeError):
        return "UNKNOWN_TYPE"
    if isinstance(exc, TemplateError):
        return "TEMPLATE_ERROR"
    return "ROUTEDOC_ERROR"


def _failure(op: str, exc: RouteDocError) -> ServiceResult:
    detail: dict[str, str] = {}
    type_name = getattr(exc, "type_name", None)
    if type_name is not None:
        detail["type"] = type_name
    return ServiceResult.failure(op, _error_code(exc), str(exc), **detail)


def split_annotations(doc: dict[str, str]) -> tuple[str, str]:
    """Return ``(title, comments)`` from a route's annotation mapping.

    Non-title entries become ``key: value`` lines joined by a blank line.
    """
    title = ""
    comments: list[str] = []
    for key, value in doc.items():
        if key == TITLE_KEY:
            title = value
            continue
        comments.append(f"{key}: {value.strip()}")
    return title, "\n\n".join(comments)


class DocService:
    """Resolve, render, and assemble documentation for one service.

    The type registry is built once at construction and shared read-only
    by every route.
    """

    def __init__(
        self,
        description: ServiceDescription,
        *,
        render: RenderConfig | None = None,
    ) -> None:
        self._description = description
        self._render = render or RenderConfig()
        self._registry = TypeRegistry(description.types)

    @property
    def description(self) -> ServiceDescription:
        return self._description

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def warnings(self) -> list[str]:
        """Non-fatal problems found in the description itself."""
        return [f"Duplicate type declaration: {name}" for name in self._registry.duplicates]

    def root_for(self, reference: TypeDef | None) -> TypeDef | None:
        """Return the full definition behind a route's type reference.

        Raises:
            UnknownTypeError: *reference* names a struct that is neither
                declared nor given inline.
        """
        if reference is None:
            return None
        found = self._registry.lookup(reference.name)
        if found is not None:
            return found
        if isinstance(reference, StructType) and not reference.fields:
            raise UnknownTypeError(reference.name)
        return reference

    def resolve(self, reference: TypeDef | None) -> ResolvedSet:
        return resolve(self.root_for(reference), self._registry)

    def build_doc(self, reference: TypeDef | None) -> str:
        """Render the fenced struct block for one route type, or ``""``."""
        body = render_types(
            self.resolve(reference),
            indent=self._render.indent,
            comment_marker=self._render.comment_marker,
        )
        return fence(body, self._render.code_language)

    def route_record(self, index: int, route: Route) -> dict[str, str]:
        """Build the flat template record for *route* (*index* is 1-based)."""
        title, comments = split_annotations(route.doc)
        return {
            "index": str(index),
            "title": title,
            "routeComment": comments,
            "method": route.method.upper(),
            "uri": route.path,
            "handler": route.handler,
            "requestType": f"`{route.request_type_name or MISSING_TYPE}`",
            "responseType": f"`{route.response_type_name or MISSING_TYPE}`",
            "requestContent": self.build_doc(route.request_type),
            "responseContent": self.build_doc(route.response_type),
        }

    def render_document(self, template: jinja2.Template) -> str:
        """Render every route through *template* and concatenate the output.

        Raises:
            RouteDocError: Any resolution, rendering, or template failure.
        """
        parts: list[str] = []
        for index, route in enumerate(self._description.routes, start=1):
            record = self.route_record(index, route)
            try:
                parts.append(template.render(record))
            except jinja2.TemplateError as exc:
                raise TemplateError(f"route {index} ({route.path}): {exc}") from exc
            log.debug(
                "route_rendered",
                index=index,
                method=record["method"],
                path=route.path,
            )
        return "".join(parts)

    def generate(self, template: jinja2.Template) -> ServiceResult:
        """Render the full document. No partial output on failure."""
        op = "generate_docs"
        try:
            content = self.render_document(template)
        except RouteDocError as exc:
            log.warning("generate_failed", error=str(exc))
            return _failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "content": content,
                "route_count": len(self._description.routes),
                "template": template.name or "<string>",
            },
            warnings=self.warnings,
        )

    def describe_type(self, name: str) -> ServiceResult:
        """Resolve and render a single declared type by name."""
        op = "describe_type"
        root = self._registry.lookup(name)
        if root is None:
            return _failure(op, UnknownTypeError(name))
        resolved = resolve(root, self._registry)
        try:
            body = render_types(
                resolved,
                indent=self._render.indent,
                comment_marker=self._render.comment_marker,
            )
        except RouteDocError as exc:
            return _failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "resolved": list(resolved),
                "content": body,
            },
            warnings=self.warnings,
        )

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, routedoc.toml only contains
overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from routedoc.domain.structs import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_COMMENT_MARKER,
    DEFAULT_INDENT,
)

# Per-project directory holding an optional routedoc.toml and template overrides.
PROJECT_DIR = Path(".routedoc")


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    code_language: str = DEFAULT_CODE_LANGUAGE
    indent: str = DEFAULT_INDENT
    comment_marker: str = DEFAULT_COMMENT_MARKER


class TemplateConfig(BaseModel):
    """[template] section.

    ``path`` points at a template file; when unset, ``name`` is looked up
    in ``.routedoc/templates/`` and then among the packaged templates.
    """

    model_config = {"frozen": True}

    path: str | None = None
    name: str = "markdown.md.j2"

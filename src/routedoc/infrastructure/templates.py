"""Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

import jinja2
from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from routedoc.config.models import PROJECT_DIR
from routedoc.domain.errors import TemplateError

OVERRIDE_DIR = PROJECT_DIR / "templates"


def build_template_environment(
    *,
    project_root: Path | None = None,
    search_dirs: list[Path] | None = None,
) -> Environment:
    """Build a Jinja2 environment with user templates before packaged defaults.

    Lookup order: *search_dirs*, then ``.routedoc/templates/`` inside
    *project_root*, then the templates shipped with routedoc.

    Undefined variables raise instead of rendering blank, and autoescape
    is off so tags such as ``json:"id"`` keep their quotes.
    """
    loaders: list[BaseLoader] = []
    if search_dirs:
        loaders.append(FileSystemLoader([str(d) for d in search_dirs]))
    if project_root is not None:
        loaders.append(FileSystemLoader(str(project_root / OVERRIDE_DIR)))

    loaders.append(PackageLoader("routedoc", "templates"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        autoescape=False,
        undefined=jinja2.StrictUndefined,
    )


def load_template(
    *,
    path: Path | None = None,
    name: str = "markdown.md.j2",
    project_root: Path | None = None,
) -> jinja2.Template:
    """Load the documentation template.

    An explicit *path* wins; otherwise *name* is resolved through
    :func:`build_template_environment`.

    Raises:
        TemplateError: The template is missing or has a syntax error.
    """
    if path is not None:
        if not path.is_file():
            raise TemplateError(f"template not found: {path}")
        env = build_template_environment(project_root=project_root, search_dirs=[path.parent])
        name = path.name
    else:
        env = build_template_environment(project_root=project_root)

    try:
        return env.get_template(name)
    except jinja2.TemplateNotFound as exc:
        raise TemplateError(f"template not found: {exc.name}") from exc
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateError(f"{exc.filename or name}:{exc.lineno}: {exc.message}") from exc

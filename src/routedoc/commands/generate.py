"""Command: render route documentation from a service description."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from routedoc.commands._base import RouteDocCommand, description_argument

if TYPE_CHECKING:
    from routedoc.commands._context import AppContext

_GENERATE_EXAMPLES = """\
  routedoc generate api.yaml
  routedoc generate api.json --template docs.md.j2 --output API.md
  cat api.yaml | routedoc generate -
  routedoc --json generate api.yaml"""


@click.command(cls=RouteDocCommand, examples=_GENERATE_EXAMPLES)
@description_argument
@click.option(
    "-t",
    "--template",
    "template_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Jinja2 template rendered once per route.",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def generate(
    app: AppContext,
    description: str,
    template_file: str | None,
    output_file: str | None,
) -> None:
    """Render documentation for every route in DESCRIPTION."""
    from routedoc.domain.errors import TemplateError
    from routedoc.infrastructure.templates import load_template
    from routedoc.services.docs import DocService
    from routedoc.services.result import ServiceResult

    service_description = app.load_description(description)
    try:
        template = load_template(
            path=app.template_path(template_file),
            name=app.settings.template.name,
            project_root=app.settings.project_root,
        )
    except TemplateError as exc:
        app.emit(ServiceResult.failure("generate_docs", "TEMPLATE_ERROR", str(exc)))
        return

    result = DocService(service_description, render=app.settings.render).generate(template)

    if not result.ok:
        app.emit(result)
        return

    if output_file:
        Path(output_file).write_text(result.data["content"], encoding="utf-8")
        app.emit(
            ServiceResult(
                ok=True,
                op="generate_docs",
                data={
                    "output_file": output_file,
                    "route_count": result.data["route_count"],
                    "template": result.data["template"],
                },
                warnings=result.warnings,
            )
        )
    elif app.settings.json_output:
        app.emit(result)
    else:
        # Pipe-friendly: raw document to stdout
        click.echo(result.data["content"], nl=False)
        app.warn(result.warnings)

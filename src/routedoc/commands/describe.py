"""Command: show one declared type with everything it references."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from routedoc.commands._base import RouteDocCommand, description_argument

if TYPE_CHECKING:
    from routedoc.commands._context import AppContext


@click.command(
    cls=RouteDocCommand,
    examples="""\
  routedoc describe api.yaml User
  routedoc --json describe api.yaml GetUserReq""",
)
@description_argument
@click.argument("type_name")
@click.pass_obj
def describe(app: AppContext, description: str, type_name: str) -> None:
    """Resolve TYPE_NAME from DESCRIPTION and print its struct definitions."""
    from routedoc.services.docs import DocService

    service_description = app.load_description(description)
    result = DocService(service_description, render=app.settings.render).describe_type(type_name)

    if not result.ok or app.settings.json_output:
        app.emit(result)
        return
    click.echo(result.data["content"])
    app.warn(result.warnings)

"""Shared Click pieces for routedoc commands.

Commands built with :class:`RouteDocCommand` take an ``examples`` string
and grow an eager ``--examples`` flag that prints it, so ``--help`` only
carries a one-line pointer to the examples.
"""

from __future__ import annotations

from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for usage examples."

# DESCRIPTION: a YAML/JSON service description file, or "-" for stdin.
description_argument = click.argument(
    "description",
    type=click.Path(dir_okay=False, allow_dash=True),
)


class RouteDocCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples.strip("\n") if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(EXAMPLES_HINT)


class RouteDocGroup(click.Group):
    """Root group; ``@group.command`` defaults to :class:`RouteDocCommand`."""

    command_class = RouteDocCommand

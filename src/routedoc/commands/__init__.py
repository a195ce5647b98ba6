"""Subcommand modules for routedoc.

Provides register_commands() which uses deferred imports to keep
``routedoc --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from routedoc.commands.describe import describe
    from routedoc.commands.generate import generate

    cli.add_command(generate)
    cli.add_command(describe)

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Configures logging and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from routedoc.output.formatters import OutputSettings, format_result, format_warning

if TYPE_CHECKING:
    from routedoc.config.settings import RouteDocSettings
    from routedoc.domain.types import ServiceDescription
    from routedoc.services.result import ServiceResult


class AppContext:
    """Settings plus the helpers every command needs."""

    def __init__(self, settings: RouteDocSettings) -> None:
        self.settings = settings

        from routedoc.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    def load_description(self, path: str) -> ServiceDescription:
        """Load a service description, turning failures into a usage error."""
        from routedoc.domain.errors import DescriptionError
        from routedoc.infrastructure.description import load_description

        try:
            return load_description(path)
        except DescriptionError as exc:
            raise click.ClickException(str(exc)) from exc

    def template_path(self, override: str | None) -> Path | None:
        """Pick the template file: CLI flag, then ``[template] path``.

        A relative config path is taken from the project root.
        """
        if override:
            return Path(override)
        configured = self.settings.template.path
        if not configured:
            return None
        p = Path(configured)
        return p if p.is_absolute() else self.settings.project_root / p

    def warn(self, warnings: list[str]) -> None:
        """Echo warnings to stderr, keeping stdout clean for piping."""
        for warning in warnings:
            click.echo(format_warning(warning), err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                self.warn(result.warnings)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

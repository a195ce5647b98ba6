"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich text) or machines
(``--json``). Large ``content`` payloads are only shown in human mode by
the commands that produce them, never by the generic formatter.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from routedoc.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from routedoc.services.result import ServiceResult

_HIDDEN_KEYS = frozenset({"content"})


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="rd.key")
    if isinstance(value, (dict, list)):
        line.append(_json.dumps(value, separators=(",", ":")))
    elif key in ("path", "output_file", "template"):
        line.append(str(value), style="rd.path")
    elif key in ("name", "type"):
        line.append(str(value), style="rd.type")
    else:
        line.append(str(value))
    console.print(line)


def _render_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="rd.ok"), Text(f"  {result.op}", style="rd.op"))
        for key, value in result.data.items():
            if key not in _HIDDEN_KEYS:
                _field(console, key, value)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="rd.error"), Text(f"  {result.op}", style="rd.op"))
        console.print(Text(f"  {message}"))
        if verbose and result.error is not None:
            console.print(Text(f"  code: {result.error.code}", style="rd.key"))
            for key, value in result.error.detail.items():
                _field(console, key, value)
    return get_output(console).rstrip("\n")


def format_warning(message: str) -> str:
    """Format one non-fatal warning line for stderr."""
    console = create_console()
    console.print(Text.assemble(("WARNING", "rd.warning"), f": {message}"), soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode dumps the whole result (content included); quiet mode
    returns a single status line.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        if result.ok:
            return f"OK: {result.op}"
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"
    return _render_human(result, verbose=settings.verbose)

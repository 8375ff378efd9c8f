"""Format a ServiceResult for humans or machines.

Three modes, chosen by :class:`OutputSettings`:
- JSON (``--json``): the full ServiceResult as indented JSON.
- Quiet (``-q``): only the primary value (encoded data or canonical URI).
- Human (default): Rich-styled status line plus key-value fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.text import Text

from dtneid.output.console import create_console, get_output, style_for_key

if TYPE_CHECKING:
    from rich.console import Console

    from dtneid.services.result import ServiceResult

# Result keys printed by --quiet, first match wins.
_PRIMARY_KEYS = ("data", "uri")


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="eid.error"),
        Text(f"  {result.op}", style="eid.op"),
        Text(f": {msg}"),
        sep="",
        soft_wrap=True,
    )
    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="eid.key"), soft_wrap=True)
        for key, value in err.detail.items():
            console.print(Text(f"  {key}: {value}", style="eid.key"), soft_wrap=True)


def _render_ok(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="eid.ok"), Text(f"  {result.op}", style="eid.op"), sep="")
    for key, value in result.data.items():
        console.print(
            Text(f"  {key}: ", style="eid.key"),
            Text(str(value), style=style_for_key(key)),
            sep="",
            soft_wrap=True,
        )


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    for key in _PRIMARY_KEYS:
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings* (default: human)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)

    console = create_console()
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return get_output(console).rstrip("\n")

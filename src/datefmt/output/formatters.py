"""Human, quiet, and JSON renderings of a ServiceResult.

Human mode prints an ``OK  <op>`` status line followed by the payload as
key-value pairs. Quiet mode prints only the ``result``/``value`` field so
output can be piped. JSON mode dumps the whole model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from datefmt.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from datefmt.services.result import ServiceResult

# Payload keys holding the answer, checked in order by quiet mode.
_PRIMARY_KEYS = ("result", "value")


@dataclass(frozen=True)
class OutputSettings:
    """Output switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _error_line(result: ServiceResult) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


def _primary_value(data: dict[str, Any]) -> Any:
    for key in _PRIMARY_KEYS:
        if key in data:
            return data[key]
    return None


def _render_fields(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        style = "df.value" if key in _PRIMARY_KEYS else ""
        console.print(Text(f"  {key}: ", style="df.key"), Text(str(value), style=style), sep="")


def render_human(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as styled text (plain text outside a terminal)."""
    console = create_console()
    if not result.ok:
        err = result.error
        console.print(
            Text("ERROR", style="df.error"),
            Text(f"  {result.op}", style="df.op"),
            Text(" — "),
            Text(err.message if err else "Unknown error"),
            sep="",
        )
        if verbose and err and err.detail:
            _render_fields(console, err.detail)
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="df.ok"), Text(f"  {result.op}", style="df.op"), sep="")
    _render_fields(console, result.data)
    if verbose and result.meta:
        _render_fields(console, result.meta)
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        if not result.ok:
            return _error_line(result)
        value = _primary_value(result.data)
        return f"OK: {result.op}" if value is None else str(value)
    return render_human(result, verbose=settings.verbose)

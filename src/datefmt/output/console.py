"""Rich Console factory and theme for datefmt output.

Consoles render to a StringIO buffer so formatters keep returning plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DATEFMT_THEME = Theme(
    {
        "df.ok": "bold green",
        "df.error": "bold red",
        "df.warning": "bold yellow",
        "df.op": "bold cyan",
        "df.key": "dim",
        "df.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DATEFMT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

"""Command group: convert locale tags between CLDR and BCP47 notation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datefmt.commands._base import DateFmtGroup

if TYPE_CHECKING:
    from datefmt.commands._context import AppContext


@click.group(
    cls=DateFmtGroup,
    examples="""\
  datefmt locale to-bcp47 en_US
  datefmt locale to-bcp47 root
  datefmt locale to-cldr pt-BR
  datefmt -q locale to-cldr und""",
)
def locale() -> None:
    """Convert locale identifiers (first separator only)."""


@locale.command("to-bcp47")
@click.argument("tag")
@click.pass_obj
def to_bcp47(app: AppContext, tag: str) -> None:
    """CLDR -> BCP47: first '_' becomes '-', 'root' becomes 'und'."""
    app.emit(app.service.to_bcp47(tag))


@locale.command("to-cldr")
@click.argument("tag")
@click.pass_obj
def to_cldr(app: AppContext, tag: str) -> None:
    """BCP47 -> CLDR: first '-' becomes '_', 'und' becomes 'root'."""
    app.emit(app.service.to_cldr(tag))

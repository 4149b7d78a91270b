"""Command: move a date back by one calendar period."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datefmt.commands._base import DateFmtCommand

if TYPE_CHECKING:
    from datefmt.commands._context import AppContext


@click.command(
    cls=DateFmtCommand,
    examples="""\
  datefmt subtract 2024-03-01
  datefmt subtract 2024-03-31 --period month
  datefmt subtract 2024-02-29T08:30:00 --period year
  datefmt -q subtract 2024-01-08 -p week""",
)
@click.argument("value")
@click.option(
    "-p",
    "--period",
    default="day",
    show_default=True,
    help="day, week, month, or year. Anything else leaves the date unchanged.",
)
@click.pass_obj
def subtract(app: AppContext, value: str, period: str) -> None:
    """Subtract one PERIOD from the ISO-8601 date VALUE."""
    app.emit(app.service.subtract(value, period))

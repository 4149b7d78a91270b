"""Command: print the current date and/or time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datefmt.commands._base import DateFmtCommand

if TYPE_CHECKING:
    from datefmt.commands._context import AppContext


@click.command(
    cls=DateFmtCommand,
    examples="""\
  datefmt now
  datefmt now --date --locale de-DE
  datefmt now --time --locale fr_FR
  DATETIME_FORMAT='yyyy-MM-dd HH:mm' datefmt now""",
)
@click.option("--date", "kind", flag_value="date", help="Date only.")
@click.option("--time", "kind", flag_value="time", help="Time only.")
@click.option("--datetime", "kind", flag_value="datetime", help="Date and time (default).")
@click.option("-l", "--locale", default=None, help="CLDR or BCP47 locale tag.")
@click.pass_obj
def now(app: AppContext, kind: str | None, locale: str | None) -> None:
    """Print the current date/time for a locale.

    DATE_FORMAT, TIME_FORMAT and DATETIME_FORMAT override the locale with
    an explicit pattern such as ``yyyy-MM-dd``.
    """
    app.emit(app.service.now(kind or "datetime", locale=locale))

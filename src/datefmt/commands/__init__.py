"""Subcommand modules for datefmt.

Provides register_commands() which uses deferred imports to keep
``datefmt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``locale`` group and the standalone commands on *cli*."""
    from datefmt.commands.locale import locale

    cli.add_command(locale)

    from datefmt.commands.now import now
    from datefmt.commands.subtract import subtract

    cli.add_command(now)
    cli.add_command(subtract)

"""Subcommand modules for rsforge.

Provides register_commands() which uses deferred imports to keep
``rsforge --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from rsforge.commands.add import add
    from rsforge.commands.list_cmd import list_cmd
    from rsforge.commands.scaffold import scaffold

    cli.add_command(scaffold)
    cli.add_command(list_cmd)
    cli.add_command(add)

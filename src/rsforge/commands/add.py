"""Command: add a dependency to the project in the current directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rsforge.commands._base import ForgeCommand
from rsforge.domain.commands import LATEST

if TYPE_CHECKING:
    from rsforge.commands._context import AppContext

_ADD_EXAMPLES = """\
  rsforge add serde
  rsforge add tokio --version 1.38
  rsforge add uuid -v 1.8.0"""


@click.command("add", cls=ForgeCommand, examples=_ADD_EXAMPLES)
@click.argument("crate_name", metavar="CRATE")
@click.option(
    "-v",
    "--version",
    default=LATEST,
    show_default=True,
    help="Version to use.",
)
@click.pass_obj
def add(app: AppContext, crate_name: str, version: str) -> None:
    """Add a dependency to the project."""
    from rsforge.domain.commands import AddCommand
    from rsforge.services.add import AddService

    command = AddCommand(crate_name=crate_name, version=version)
    app.emit(AddService(app.runner, workdir=app.settings.workdir).add(command))

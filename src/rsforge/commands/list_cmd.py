"""Command: list frameworks (named list_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rsforge.commands._base import ForgeCommand

if TYPE_CHECKING:
    from rsforge.commands._context import AppContext


@click.command("list", cls=ForgeCommand)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List available frameworks."""
    from rsforge.domain.commands import ListCommand
    from rsforge.services.catalog import CatalogService

    app.emit(CatalogService.list_frameworks(ListCommand()))

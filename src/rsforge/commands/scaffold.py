"""Command: scaffold a new Rust backend project."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rsforge.commands._base import ForgeCommand

if TYPE_CHECKING:
    from rsforge.commands._context import AppContext

_SCAFFOLD_EXAMPLES = """\
  rsforge scaffold --name demo --framework axum
  rsforge scaffold -n api -f actix-web -d dotenvy -d sqlx
  rsforge scaffold -n tool -f clap --no-git
  rsforge --json scaffold -n demo -f axum"""


@click.command("scaffold", cls=ForgeCommand, examples=_SCAFFOLD_EXAMPLES)
@click.option("-n", "--name", required=True, help="Name of the project.")
@click.option(
    "-f",
    "--framework",
    required=True,
    help="Name of the framework (e.g. axum, actix-web).",
)
@click.option(
    "-d",
    "--deps",
    multiple=True,
    help="Additional dependency to add (repeatable, e.g. dotenvy).",
)
@click.option("--no-git", is_flag=True, help="Skip .gitignore and the initial git commit.")
@click.pass_obj
def scaffold(
    app: AppContext,
    name: str,
    framework: str,
    deps: tuple[str, ...],
    no_git: bool,
) -> None:
    """Scaffold a new framework project."""
    from rsforge.domain.commands import ScaffoldCommand
    from rsforge.services.scaffold import ScaffoldService

    command = ScaffoldCommand(name=name, framework=framework, deps=deps, git=not no_git)
    service = ScaffoldService(
        app.runner,
        None if no_git else app.plugins,
        workdir=app.settings.workdir,
    )
    app.emit(service.scaffold(command))

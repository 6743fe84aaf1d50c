"""Root CLI group for rsforge with global flags and command registration."""

from __future__ import annotations

import click

from rsforge import __version__
from rsforge.commands import register_commands
from rsforge.commands._base import ForgeGroup
from rsforge.commands._context import AppContext
from rsforge.config.settings import ForgeSettings


_CLI_EXAMPLES = """\
  rsforge list
  rsforge scaffold -n demo -f axum -d dotenvy
  rsforge add serde -v 1.0
  rsforge --json -c ./rsforge.toml scaffold -n api -f actix-web --no-git"""


@click.group(cls=ForgeGroup, examples=_CLI_EXAMPLES, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rsforge")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Path to an rsforge.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """rsforge: scaffold Rust backend projects with cargo."""
    ctx.ensure_object(dict)
    settings = ForgeSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the cargo runner, the plugin manager, and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rsforge.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rsforge.config.settings import ForgeSettings
    from rsforge.infrastructure.cargo import CargoRunner
    from rsforge.plugins.manager import PluginManager
    from rsforge.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The runner and plugin manager are built lazily so ``--help`` and
    ``list`` never load entry-point plugins.
    """

    def __init__(self, settings: ForgeSettings) -> None:
        self.settings = settings
        self._runner: CargoRunner | None = None
        self._plugins: PluginManager | None = None

        from rsforge.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def runner(self) -> CargoRunner:
        """Cargo runner bound to the configured binary."""
        if self._runner is None:
            from rsforge.infrastructure.cargo import CargoRunner

            self._runner = CargoRunner(self.settings.cargo.binary)
        return self._runner

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager with entry-point plugins and the built-in git plugin."""
        if self._plugins is None:
            from rsforge.plugins.builtins.git import GitPlugin
            from rsforge.plugins.manager import PluginManager

            pm = PluginManager()
            pm.discover_and_load()
            pm.register_plugin(GitPlugin(self.settings.git), name="git")
            self._plugins = pm
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr and exits with ``result.exit_code``.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(result.exit_code)

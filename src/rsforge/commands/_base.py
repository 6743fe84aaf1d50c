"""Click base classes that carry an optional ``--examples`` flag.

``--help`` stays short; ``--examples`` prints a few ready-to-paste
invocations and exits before the command body (or any subcommand) runs.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Accepts ``examples=`` and appends an eager ``--examples`` option."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(self.examples)
            ctx.exit(0)


class ForgeCommand(_ExamplesMixin, click.Command):
    """A subcommand with optional ``--examples``."""


class ForgeGroup(_ExamplesMixin, click.Group):
    """The root group with optional ``--examples``."""

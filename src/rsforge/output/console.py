"""Rich Console factory and theme for rsforge output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FORGE_THEME = Theme(
    {
        "forge.ok": "bold green",
        "forge.error": "bold red",
        "forge.warning": "bold yellow",
        "forge.op": "bold cyan",
        "forge.key": "dim",
        "forge.name": "bold blue",
        "forge.path": "dim",
        "forge.framework": "magenta",
        "forge.hint": "bold",
        "forge.step": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FORGE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

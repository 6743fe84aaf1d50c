"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`; every
service op has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from rsforge.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rsforge.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    frameworks = result.data.get("frameworks")
    if isinstance(frameworks, list):
        return "\n".join(frameworks)
    if result.op == "scaffold":
        return str(result.data.get("path", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="forge.ok")
    op = Text(f"  {result.op}", style="forge.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="forge.key")
    if key in ("name", "crate"):
        v = Text(str(value), style="forge.name")
    elif key == "path":
        v = Text(str(value), style="forge.path")
    elif key == "framework":
        v = Text(str(value), style="forge.framework")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_steps(console: Console, result: ServiceResult) -> None:
    """Progress lines recorded by the service, in the order they ran."""
    for step in result.data.get("steps", []):
        console.print(Text(step, style="forge.step"))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="forge.warning"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an error result, with the failing command always shown."""
    msg = result.error.message if result.error else "Unknown error"
    _render_steps(console, result)
    console.print(Text("ERROR", style="forge.error"), Text(f"  {result.op}", style="forge.op"))
    console.print(Text(f"  {msg}"))
    if result.error and result.error.detail:
        detail = result.error.detail
        if "command" in detail:
            _field(console, "command", detail["command"])
        if "returncode" in detail:
            _field(console, "exit code", detail["returncode"])
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in detail.items():
                console.print(Text(f"    {k}: {v}"))
    if verbose and result.data:
        completed = result.data.get("dependencies") or []
        if completed:
            _field(console, "completed", ", ".join(completed))
    _render_warnings(console, result)


# ── Operation renderers ──────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fixed framework listing, byte-identical on every run."""
    console.print("Available frameworks:")
    for framework in result.data.get("frameworks", []):
        console.print(Text(f"  - {framework}"))


def _render_scaffold(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a scaffolded project summary and the next command to run."""
    _render_steps(console, result)
    _status_line(console, result)
    d = result.data
    for key in ("name", "path", "framework", "template"):
        if key in d:
            _field(console, key, d[key])
    deps = d.get("dependencies", [])
    _field(console, "dependencies", len(deps))
    if verbose:
        for dep in deps:
            console.print(Text(f"    {dep}"))
    files = d.get("files_created", [])
    _field(console, "files_created", len(files))
    if verbose:
        for f in files:
            console.print(Text(f"    {f}"))
    console.print()
    console.print(Text(f"Project '{d.get('name', '')}' scaffolded successfully!", style="forge.ok"))
    console.print(Text(f"  cd {d.get('name', '')} && cargo run", style="forge.hint"))


def _render_add(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "crate", d.get("crate", ""))
    _field(console, "version", d.get("version", ""))
    if verbose:
        _field(console, "spec", d.get("spec", ""))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "scaffold": _render_scaffold,
    "add_dependency": _render_add,
    "list_frameworks": _render_list,
}

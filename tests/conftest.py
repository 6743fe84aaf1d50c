"""Shared pytest fixtures and test helpers for rsforge tests."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

_real_run = subprocess.run


class FakeCargo:
    """Stand-in for the cargo binary.

    Records every cargo argv and simulates ``cargo new`` by laying out a
    minimal project. Non-cargo commands (git) pass through to the real
    ``subprocess.run``.
    """

    def __init__(self, binary: str = "cargo") -> None:
        self.binary = binary
        self.calls: list[tuple[list[str], Path | None]] = []
        self._stubs: dict[tuple[str, ...], int] = {}

    def stub(self, *args: str, returncode: int = 0) -> None:
        """Answer the cargo call whose arguments start with *args* without side effects."""
        self._stubs[args] = returncode

    def fail_on(self, *args: str, returncode: int = 101) -> None:
        """Make the cargo call whose arguments start with *args* exit non-zero."""
        self.stub(*args, returncode=returncode)

    @property
    def argvs(self) -> list[list[str]]:
        return [argv[1:] for argv, _cwd in self.calls]

    def added(self) -> list[list[str]]:
        """Arguments after ``add`` for each cargo add call, in order."""
        return [argv[1:] for argv in self.argvs if argv[:1] == ["add"]]

    def __call__(self, argv: Iterable[str], *args: object, **kwargs: object):
        argv = list(argv)
        if not argv or argv[0] != self.binary:
            return _real_run(argv, *args, **kwargs)
        cwd = kwargs.get("cwd")
        cwd_path = Path(cwd) if cwd is not None else None
        self.calls.append((argv, cwd_path))

        for prefix, returncode in self._stubs.items():
            if tuple(argv[1 : 1 + len(prefix)]) == prefix:
                return subprocess.CompletedProcess(argv, returncode)

        if argv[1:2] == ["new"]:
            root = (cwd_path or Path.cwd()) / argv[2]
            (root / "src").mkdir(parents=True)
            (root / "Cargo.toml").write_text(f'[package]\nname = "{argv[2]}"\n', encoding="utf-8")
            (root / "src" / "main.rs").write_text(
                'fn main() {\n    println!("Hello, world!");\n}\n', encoding="utf-8"
            )
        return subprocess.CompletedProcess(argv, 0)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_cargo(monkeypatch: pytest.MonkeyPatch) -> FakeCargo:
    """Replace cargo subprocess calls with a recording fake."""
    fake = FakeCargo()
    monkeypatch.setattr("rsforge.infrastructure.cargo.subprocess.run", fake)
    return fake


@pytest.fixture
def _isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so scaffolded projects land there.

    Use via ``@pytest.mark.usefixtures("_isolated_workdir")``. Tests that need
    the path can also request ``tmp_path`` (pytest deduplicates).
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root-handler swap that every CLI invocation performs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    forge = logging.getLogger("rsforge")
    forge_level = forge.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    forge.setLevel(forge_level)

"""Process runner for the ``cargo`` package manager.

Each call spawns one child process with inherited stdin/stdout/stderr and
blocks until it exits. There is no timeout, retry, or output capture; cargo
prints straight to the user's terminal. The exit status is handed back as a
:class:`ProcessOutcome` value so callers decide whether to continue.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Conventional shell status for "command not found".
MISSING_BINARY_RETURNCODE = 127


class ProcessOutcome(BaseModel):
    """Exit status of a single cargo invocation."""

    model_config = {"frozen": True}

    args: list[str]
    cwd: str | None = None
    returncode: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CargoRunner:
    """Thin wrapper around the cargo binary.

    Usage::

        runner = CargoRunner()
        if runner.new_project("demo", cwd=Path.cwd()).ok:
            runner.add_dependency("axum", cwd=Path("demo"))
    """

    def __init__(self, binary: str = "cargo") -> None:
        self.binary = binary

    def run(self, *args: str, cwd: Path | None = None) -> ProcessOutcome:
        """Run ``cargo <args>`` in *cwd* and wait for it to exit."""
        argv = [self.binary, *args]
        cwd_str = str(cwd) if cwd is not None else None
        logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd_str or ".")
        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as exc:
            logger.warning("Could not run %s: %s", self.binary, exc)
            return ProcessOutcome(
                args=argv,
                cwd=cwd_str,
                returncode=MISSING_BINARY_RETURNCODE,
                error=str(exc),
            )
        if completed.returncode != 0:
            logger.debug("%s exited with %d", " ".join(argv), completed.returncode)
        return ProcessOutcome(args=argv, cwd=cwd_str, returncode=completed.returncode)

    def new_project(self, name: str, *, cwd: Path | None = None) -> ProcessOutcome:
        """``cargo new <name>``: create a binary project."""
        return self.run("new", name, cwd=cwd)

    def add_dependency(
        self,
        spec: str,
        *,
        features: str | None = None,
        cwd: Path | None = None,
    ) -> ProcessOutcome:
        """``cargo add <spec> [--features <features>]``."""
        args = ["add", spec]
        if features:
            args += ["--features", features]
        return self.run(*args, cwd=cwd)

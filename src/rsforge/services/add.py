"""AddService: add one dependency to the project in the working directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rsforge.services.base import BaseService
from rsforge.services.result import ServiceResult

if TYPE_CHECKING:
    from rsforge.domain.commands import AddCommand
    from rsforge.infrastructure.cargo import CargoRunner

logger = logging.getLogger(__name__)


class AddService(BaseService):
    """Runs ``cargo add`` where the user is standing.

    No manifest search is done; cargo itself reports when there is no
    ``Cargo.toml`` in reach.
    """

    def __init__(self, runner: CargoRunner, *, workdir: Path | None = None) -> None:
        super().__init__(runner)
        self._workdir = workdir

    def add(self, command: AddCommand) -> ServiceResult:
        """Add ``crate`` or ``crate@version`` and mirror cargo's exit status."""
        spec = command.spec
        outcome = self._runner.add_dependency(spec, cwd=self._workdir)
        data = {
            "crate": command.crate_name,
            "version": command.version,
            "spec": spec,
        }
        if not outcome.ok:
            logger.warning("cargo add %s exited with %d", spec, outcome.returncode)
            return self._cargo_failure(
                "add_dependency",
                outcome,
                f"Failed to add {command.crate_name}",
                data=data,
            )
        return ServiceResult(ok=True, op="add_dependency", data=data)

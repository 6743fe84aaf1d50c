"""ScaffoldService: create a Rust backend project skeleton.

Pipeline, strictly sequential:

1. ``cargo new <name>`` in the working directory
2. ``cargo add <framework>`` inside the new project
3. ``cargo add <dep>`` for each requested dependency, in order
4. serde (derive) and tokio (full) when the framework is recognized
5. overwrite ``src/main.rs`` with the framework template
6. create ``src/<module>/mod.rs`` for each fixed module
7. ``post_scaffold`` plugin hook (git init and initial commit)

The first failing step ends the run. Completed steps are never rolled back;
a failed result still lists what was done in ``data``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rsforge.domain.frameworks import (
    ENTRY_POINT,
    MODULE_DIRS,
    extra_dependencies,
    template_for,
    template_name,
)
from rsforge.infrastructure.filesystem import create_module_dir, relative_to, write_entry_point
from rsforge.services.base import BaseService
from rsforge.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from rsforge.domain.commands import ScaffoldCommand
    from rsforge.infrastructure.cargo import CargoRunner
    from rsforge.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class ScaffoldService(BaseService):
    """Orchestrates project creation, dependencies, template and modules."""

    def __init__(
        self,
        runner: CargoRunner,
        plugins: PluginManager | None = None,
        *,
        workdir: Path | None = None,
    ) -> None:
        super().__init__(runner, plugins)
        self._workdir = workdir or Path.cwd()

    def scaffold(self, command: ScaffoldCommand) -> ServiceResult:
        op = "scaffold"
        name = command.name
        framework = command.framework
        project_dir = self._workdir / name
        warnings: list[str] = []
        steps: list[str] = []
        added: list[str] = []
        files_created: list[str] = []
        modules: list[str] = []

        def step(message: str) -> None:
            steps.append(message)
            logger.debug(message)

        def progress() -> dict[str, Any]:
            return {
                "name": name,
                "path": str(project_dir),
                "framework": framework,
                "template": template_name(framework),
                "dependencies": list(added),
                "modules": list(modules),
                "files_created": list(files_created),
                "steps": list(steps),
            }

        step(f"Creating new Cargo project: {name}")
        outcome = self._runner.new_project(name, cwd=self._workdir)
        if not outcome.ok:
            return self._cargo_failure(
                op, outcome, f"Failed to create project '{name}'", data=progress()
            )

        # -- dependencies ---------------------------------------------------
        requested: list[tuple[str, str | None]] = [(framework, None)]
        requested += [(dep, None) for dep in command.deps]
        requested += [(extra.crate, extra.features) for extra in extra_dependencies(framework)]

        for spec, features in requested:
            label = f"{spec} --features {features}" if features else spec
            step(f"Adding {label} to {name}")
            outcome = self._runner.add_dependency(spec, features=features, cwd=project_dir)
            if not outcome.ok:
                logger.warning("Stopping scaffold of %s: cargo add %s failed", name, spec)
                return self._cargo_failure(
                    op,
                    outcome,
                    f"Failed to add dependency '{spec}'",
                    data=progress(),
                    warnings=warnings,
                )
            added.append(label)

        # -- files ----------------------------------------------------------
        try:
            step(f"Writing {ENTRY_POINT} ({template_name(framework)} template)")
            main_path = write_entry_point(project_dir, template_for(framework))
            files_created.append(relative_to(main_path, project_dir))
            for module in MODULE_DIRS:
                step(f"Creating module: {module}")
                mod_path = create_module_dir(project_dir, module)
                modules.append(module)
                files_created.append(relative_to(mod_path, project_dir))
        except OSError as exc:
            logger.warning("Stopping scaffold of %s: %s", name, exc)
            return ServiceResult(
                ok=False,
                op=op,
                data=progress(),
                warnings=warnings,
                error=ServiceError(
                    code=ErrorCode.FILESYSTEM,
                    message=f"Failed to write project files: {exc}",
                    detail={"path": str(getattr(exc, "filename", "") or project_dir)},
                ),
            )

        if command.git:
            # Hooks may return their own progress lines.
            for reported in self._dispatch_event(
                "post_scaffold",
                {
                    "project_name": name,
                    "project_path": str(project_dir),
                    "framework": framework,
                    "dependencies": list(added),
                },
                warnings,
            ):
                steps.extend(reported or [])

        return ServiceResult(ok=True, op=op, data=progress(), warnings=warnings)

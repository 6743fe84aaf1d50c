"""Built-in Git plugin: version control for freshly scaffolded projects.

On ``post_scaffold`` it writes the project ``.gitignore``, runs ``git init``,
stages everything, and records one initial commit. The commit identity is
passed with ``-c`` so no global git config is required.

Git failures are logged and re-raised as :class:`GitError` so the caller can
turn them into result warnings. They never undo the scaffold.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pluggy

from rsforge.config.models import GitConfig
from rsforge.infrastructure.filesystem import write_gitignore

hookimpl = pluggy.HookimplMarker("rsforge")

logger = logging.getLogger(__name__)


class GitError(RuntimeError):
    """A git subprocess could not be run or exited non-zero."""


class GitPlugin:
    """Initialize a git repository with an initial commit after scaffolding."""

    def __init__(self, config: GitConfig | None = None) -> None:
        self._config = config or GitConfig()

    @hookimpl
    def post_scaffold(
        self,
        project_name: str,
        project_path: str,
        framework: str,
        dependencies: list[str],
    ) -> list[str] | None:
        """Write .gitignore, init the repo and commit the scaffolded tree."""
        if not self._config.enabled:
            return None
        root = Path(project_path)
        steps: list[str] = []
        if self._config.auto_ignore:
            write_gitignore(root)
            steps.append("Creating .gitignore file")
        self._git(root, "init")
        self._git(root, "add", ".")
        self._git(root, "commit", "-m", self._config.commit_message)
        logger.debug("Initialized git repository for %s", project_name)
        steps.append("Initializing git repository")
        return steps

    def _git(self, root: Path, subcommand: str, *args: str) -> subprocess.CompletedProcess[str]:
        """Run ``git <subcommand> <args>`` in *root*; raise GitError on any failure."""
        argv = ["git"]
        if subcommand == "commit":
            argv += [
                "-c",
                f"user.name={self._config.author_name}",
                "-c",
                f"user.email={self._config.author_email}",
            ]
        argv += [subcommand, *args]
        try:
            return subprocess.run(
                argv,
                cwd=root,
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            reason = (getattr(exc, "stderr", None) or "").strip() or str(exc)
            logger.warning("git %s failed: %s", subcommand, reason)
            msg = f"git {subcommand} failed: {reason}"
            raise GitError(msg) from exc

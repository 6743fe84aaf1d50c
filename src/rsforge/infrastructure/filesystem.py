"""Filesystem writes for a freshly created cargo project.

Nothing here is transactional. If a write fails partway, the directories
and files created before it stay on disk.
"""

from __future__ import annotations

from pathlib import Path

from rsforge.domain.frameworks import ENTRY_POINT

MODULE_FILE = "mod.rs"

GITIGNORE_CONTENT = """\
# Rust
/target/


# Environment
.env
.env.local
.env.*.local


"""


def write_entry_point(project_dir: Path, content: str) -> Path:
    """Overwrite ``src/main.rs`` with *content*; returns the written path."""
    path = project_dir / ENTRY_POINT
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def create_module_dir(project_dir: Path, module_name: str) -> Path:
    """Create ``src/<module_name>/mod.rs`` with no content.

    Idempotent: an existing directory is reused and the file is truncated.
    """
    module_dir = project_dir / "src" / module_name
    module_dir.mkdir(parents=True, exist_ok=True)
    mod_path = module_dir / MODULE_FILE
    mod_path.write_text("", encoding="utf-8")
    return mod_path


def write_gitignore(project_dir: Path) -> Path:
    """Write the project ``.gitignore``, replacing the one cargo generates."""
    path = project_dir / ".gitignore"
    path.write_text(GITIGNORE_CONTENT, encoding="utf-8")
    return path


def relative_to(path: Path, root: Path) -> str:
    """Render *path* relative to *root* with forward slashes."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()

"""Config file discovery.

Walk-up finder locates rsforge.toml, similar to how git finds .git/.
An explicit ``--config`` path skips the walk.
"""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME = "rsforge.toml"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for rsforge.toml.

    Returns the path to the config file, or None if not found.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None

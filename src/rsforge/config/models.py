"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``rsforge.toml`` only carries
overrides. No file is needed for normal use.
"""

from __future__ import annotations

from pydantic import BaseModel


class CargoConfig(BaseModel):
    """[cargo] section."""

    model_config = {"frozen": True}

    binary: str = "cargo"


class GitConfig(BaseModel):
    """[git] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    auto_ignore: bool = True
    author_name: str = "Rust Backend Scaffolder"
    author_email: str = "scaffolder@example.com"
    commit_message: str = "Initial commit: Scaffolded project"

"""Parsed command records.

Each CLI subcommand produces exactly one of these frozen models before any
side effect happens. ``Command`` is the tagged union over all of them,
discriminated by ``kind``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

LATEST = "latest"


class ScaffoldCommand(BaseModel):
    """``scaffold --name NAME --framework FRAMEWORK [--deps CRATE]...``"""

    model_config = {"frozen": True}

    kind: Literal["scaffold"] = "scaffold"
    name: str
    framework: str
    deps: tuple[str, ...] = ()
    git: bool = True


class ListCommand(BaseModel):
    """``list``"""

    model_config = {"frozen": True}

    kind: Literal["list"] = "list"


class AddCommand(BaseModel):
    """``add CRATE [--version VERSION]``"""

    model_config = {"frozen": True}

    kind: Literal["add"] = "add"
    crate_name: str
    version: str = LATEST

    @property
    def pinned(self) -> bool:
        return self.version != LATEST

    @property
    def spec(self) -> str:
        """The dependency argument handed to ``cargo add``."""
        if self.pinned:
            return f"{self.crate_name}@{self.version}"
        return self.crate_name


Command = Annotated[
    ScaffoldCommand | ListCommand | AddCommand,
    Field(discriminator="kind"),
]

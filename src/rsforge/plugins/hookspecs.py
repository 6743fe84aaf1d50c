"""Pluggy hook specifications for rsforge."""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("rsforge")


class RsforgeHookSpec:
    """Hook specifications for the rsforge plugin system."""

    @hookspec
    def post_scaffold(
        self,
        project_name: str,
        project_path: str,
        framework: str,
        dependencies: list[str],
    ) -> list[str] | None:
        """Called after a project is created and its modules are laid out.

        An implementation may return progress lines to show the user.
        """

"""CatalogService: reports the frameworks with dedicated templates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rsforge.domain.frameworks import LISTED_FRAMEWORKS
from rsforge.services.result import ServiceResult

if TYPE_CHECKING:
    from rsforge.domain.commands import ListCommand


class CatalogService:
    """Read-only view over the hardcoded framework list."""

    @staticmethod
    def list_frameworks(command: ListCommand) -> ServiceResult:
        """Report ``LISTED_FRAMEWORKS``; a ``list`` command has no options to apply."""
        return ServiceResult(
            ok=True,
            op="list_frameworks",
            data={"frameworks": list(LISTED_FRAMEWORKS)},
        )

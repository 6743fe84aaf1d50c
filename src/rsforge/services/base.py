"""BaseService: shared foundation for rsforge services.

Every service receives a :class:`CargoRunner` and, optionally, a
:class:`PluginManager` for lifecycle hooks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rsforge.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from rsforge.infrastructure.cargo import CargoRunner, ProcessOutcome
    from rsforge.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class AddService(BaseService):
            def add(self, command: AddCommand) -> ServiceResult:
                outcome = self._runner.add_dependency(command.spec, cwd=self._workdir)
                ...
    """

    def __init__(
        self,
        runner: CargoRunner,
        plugins: PluginManager | None = None,
    ) -> None:
        self._runner = runner
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> list[Any]:
        """Call a plugin hook synchronously and return its non-``None`` results.

        No-op (empty list) without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return []
        hook = getattr(self._plugins.hook, hook_name)
        try:
            return list(hook(**payload))
        except Exception as exc:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"{hook_name}: {exc}")
            return []

    @staticmethod
    def _cargo_failure(
        op: str,
        outcome: ProcessOutcome,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Build the failed result for a non-zero cargo exit."""
        detail: dict[str, Any] = {
            "command": " ".join(outcome.args),
            "returncode": outcome.returncode,
        }
        if outcome.error:
            detail["os_error"] = outcome.error
        return ServiceResult(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=ErrorCode.CARGO_FAILED, message=message, detail=detail),
        )

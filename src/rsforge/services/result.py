"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Service methods return ServiceResult for expected failures
instead of raising. Only the CLI layer turns a failed result into an exit
status.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorCode:
    """Error codes carried in :attr:`ServiceError.code`."""

    CARGO_FAILED = "CARGO_FAILED"
    FILESYSTEM = "FILESYSTEM"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"scaffold"``).
        data: Operation-specific payload. Failed scaffolds still report the
            steps that completed before the failure.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status for this result.

        A failed cargo step propagates its own returncode; anything else
        that failed exits with 1.
        """
        if self.ok:
            return 0
        returncode = self.error.detail.get("returncode") if self.error else None
        if isinstance(returncode, int) and returncode > 0:
            return returncode
        return 1

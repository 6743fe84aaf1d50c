"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rsforge.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="scaffold")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.exit_code == 0

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="scaffold")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult(
            ok=False,
            op="add_dependency",
            error=ServiceError(code=ErrorCode.CARGO_FAILED, message="x", detail={"returncode": 4}),
        )
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result


class TestExitCode:
    @pytest.mark.parametrize(
        ("detail", "expected"),
        [
            ({"returncode": 101}, 101),
            ({"returncode": 127}, 127),
            ({"returncode": -9}, 1),
            ({"returncode": 0}, 1),
            ({}, 1),
        ],
    )
    def test_failure_exit_codes(self, detail: dict, expected: int) -> None:
        result = ServiceResult(
            ok=False,
            op="scaffold",
            error=ServiceError(code=ErrorCode.CARGO_FAILED, message="x", detail=detail),
        )
        assert result.exit_code == expected

    def test_failure_without_error_object(self) -> None:
        assert ServiceResult(ok=False, op="scaffold").exit_code == 1

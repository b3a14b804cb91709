"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from sdbootconf.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="set_timeout", data={"timeout": 5})
        assert result.ok is True
        assert result.op == "set_timeout"
        assert result.data == {"timeout": 5}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No such file or directory")
        result = ServiceResult(ok=False, op="get_entry", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="set_default",
            data={"default": "arch.conf"},
            meta={"path": "/efi/loader/loader.conf"},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "set_default"
        assert parsed["data"]["default"] == "arch.conf"
        assert parsed["meta"]["path"] == "/efi/loader/loader.conf"
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="show")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="PARSE_ERROR",
            message="entries/arch.conf:2: invalid token sort-key",
            detail={"path": "entries/arch.conf", "lineno": 2},
        )
        assert error.detail["lineno"] == 2

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("show", "PARSE_ERROR", "bad line", path="loader.conf", lineno=3)
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(
            code="PARSE_ERROR", message="bad line", detail={"path": "loader.conf", "lineno": 3}
        )

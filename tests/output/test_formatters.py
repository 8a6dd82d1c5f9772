"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dtlfmt.output.formatters import OutputSettings, format_result
from dtlfmt.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("format", dtl="Rule|a|in|1")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "format"
        assert data["data"]["dtl"] == "Rule|a|in|1"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(
            _ok("test", key="val"), settings=OutputSettings(), json_output=True
        )
        assert output.startswith("{") is False


class TestFormatResultQuiet:
    def test_quiet_prints_dtl(self) -> None:
        result = _ok("format", dtl="Rule|a|in|1")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "Rule|a|in|1"

    def test_quiet_without_dtl(self) -> None:
        result = _ok("operators", logical=["AND", "OR"])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: operators"

    def test_quiet_error(self) -> None:
        output = format_result(_err("parse", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultHuman:
    def test_human_success(self) -> None:
        output = format_result(_ok("describe", operator="gt", description="gt (greater than)"))
        assert "OK" in output
        assert "describe" in output
        assert "gt (greater than)" in output

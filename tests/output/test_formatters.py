"""Tests for format_result and OutputSettings."""

import json

from routedoc.output.formatters import OutputSettings, format_result, format_warning
from routedoc.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="UNKNOWN_TYPE", message=msg, detail={"type": "Ghost"}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestJsonMode:
    def test_includes_content(self) -> None:
        output = format_result(
            _ok("generate_docs", content="# API", route_count=1),
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["content"] == "# API"

    def test_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"


class TestQuietMode:
    def test_ok(self) -> None:
        assert format_result(_ok("generate_docs"), settings=OutputSettings(quiet=True)) == "OK: generate_docs"

    def test_error(self) -> None:
        output = format_result(_err("describe_type", "unknown type: Ghost"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: describe_type: unknown type: Ghost"


class TestHumanMode:
    def test_ok_lists_fields_but_hides_content(self) -> None:
        output = format_result(_ok("generate_docs", content="SECRET BODY", route_count=2, output_file="API.md"))
        assert "OK" in output
        assert "generate_docs" in output
        assert "route_count: 2" in output
        assert "output_file: API.md" in output
        assert "SECRET BODY" not in output

    def test_list_values_as_json(self) -> None:
        output = format_result(_ok("describe_type", resolved=["A", "B"]))
        assert 'resolved: ["A","B"]' in output

    def test_error_message(self) -> None:
        output = format_result(_err("describe_type", "unknown type: Ghost"))
        assert "ERROR" in output
        assert "unknown type: Ghost" in output
        assert "UNKNOWN_TYPE" not in output

    def test_verbose_error_detail(self) -> None:
        output = format_result(_err(), settings=OutputSettings(verbose=True))
        assert "code: UNKNOWN_TYPE" in output
        assert "type: Ghost" in output

    def test_default_settings(self) -> None:
        assert "OK" in format_result(_ok())


class TestFormatWarning:
    def test_prefix(self) -> None:
        assert format_warning("Duplicate type declaration: User") == (
            "WARNING: Duplicate type declaration: User"
        )

    def test_long_message_not_wrapped(self) -> None:
        message = "x" * 300
        assert format_warning(message) == f"WARNING: {message}"

"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from bugintake.output.renderers import render_quiet, render_result
from bugintake.services.result import ServiceError, ServiceResult

REPORT = {
    "description": "Crash on start.\nEvery time.",
    "affected_version": "1.0",
    "python_version": None,
    "operating_system": "Linux",
    "reproduction_steps": ["open app", "crash"],
    "expected_behavior": "It starts.",
    "logs": None,
}


def _validated(**meta: int) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="validate",
        data={"source": "report.md", "report": REPORT},
        meta=dict(meta) or None,
    )


def _rejected() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="validate",
        error=ServiceError(
            code="VALIDATION_FAILED",
            message="1 error in bug report",
            detail={
                "source": "report.md",
                "errors": [
                    {
                        "kind": "unrecognized_header",
                        "field": "document",
                        "message": "Unrecognized header 'Notes'.",
                        "severity": "warning",
                        "line": 4,
                    },
                    {
                        "kind": "missing_required_field",
                        "field": "description",
                        "message": "Required section 'Describe the bug' is missing or empty.",
                        "severity": "error",
                        "line": None,
                    },
                ],
            },
        ),
    )


class TestRenderReport:
    def test_status_and_fields(self) -> None:
        output = render_result(_validated())
        lines = output.splitlines()
        assert lines[0].startswith("OK")
        assert "validate" in lines[0]
        assert "  source: report.md" in lines
        assert "  affected_version: 1.0" in lines
        assert "  python_version: -" in lines

    def test_multiline_values_indented(self) -> None:
        lines = render_result(_validated()).splitlines()
        idx = lines.index("  description:")
        assert lines[idx + 1] == "    Crash on start."
        assert lines[idx + 2] == "    Every time."

    def test_steps_numbered(self) -> None:
        lines = render_result(_validated()).splitlines()
        assert "    1. open app" in lines
        assert "    2. crash" in lines

    def test_meta_only_when_verbose(self) -> None:
        result = _validated(error_count=0, warning_count=2)
        assert "warning_count" not in render_result(result)
        assert "warning_count: 2" in render_result(result, verbose=True)


class TestRenderError:
    def test_error_table(self) -> None:
        output = render_result(_rejected())
        assert output.splitlines()[0].startswith("ERROR")
        assert "1 error in bug report" in output
        assert "missing_required_field" in output
        assert "unrecognized_header" in output
        assert "description" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_rejected(), verbose=True)
        assert "source: report.md" in output

    def test_error_without_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="validate",
            error=ServiceError(code="FILE_NOT_FOUND", message="No such file: x.md"),
        )
        assert "No such file: x.md" in render_result(result)


class TestRenderGeneric:
    def test_unknown_op(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"count": 3, "items": [1, 2]})
        output = render_result(result)
        assert "count: 3" in output
        assert "items: [1,2]" in output


class TestRenderQuiet:
    def test_ok(self) -> None:
        assert render_quiet(_validated()) == "OK: validate"

    def test_error(self) -> None:
        assert render_quiet(_rejected()) == "ERROR: validate — 1 error in bug report"

"""IntakeService — validate, normalize, and template bug reports.

Thin adapter between the pure parser in :mod:`bugintake.domain.parser`
and outer surfaces. Expected failures (unreadable input, invalid
reports) come back as ``ok=False`` results, never as exceptions.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from bugintake.domain.parser import validate, validate_form
from bugintake.domain.report import IntakeResult
from bugintake.infrastructure.templates import render_blank_template, render_report
from bugintake.services.base import BaseService
from bugintake.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

STDIN_SOURCE = "<stdin>"


def _describe(error_line: int | None, message: str) -> str:
    if error_line is None:
        return message
    return f"line {error_line}: {message}"


class IntakeService(BaseService):
    """Handles bug-report validation and rendering."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate_text(self, raw_text: str, *, source: str = STDIN_SOURCE) -> ServiceResult:
        """Validate raw report text."""
        outcome = self._validate(raw_text)
        return self._to_result("validate", outcome, source)

    def validate_file(self, path: Path) -> ServiceResult:
        """Read *path* and validate its contents."""
        raw, error = self._read(path, op="validate")
        if error is not None:
            return error
        return self.validate_text(raw, source=str(path))

    def validate_form(
        self,
        payload: Mapping[str, Any],
        *,
        source: str = STDIN_SOURCE,
    ) -> ServiceResult:
        """Validate a structured form payload."""
        outcome = validate_form(payload, required=self._settings.intake.required)
        return self._to_result("validate_form", outcome, source)

    def validate_form_json(self, raw_json: str, *, source: str = STDIN_SOURCE) -> ServiceResult:
        """Decode a JSON object and validate it as a form payload."""
        try:
            payload = json.loads(raw_json)
        except json.JSONDecodeError as exc:
            return ServiceResult(
                ok=False,
                op="validate_form",
                error=ServiceError(
                    code="INVALID_JSON",
                    message=f"Form payload is not valid JSON: {exc.msg}",
                    detail={"source": source, "line": exc.lineno, "column": exc.colno},
                ),
            )
        if not isinstance(payload, dict):
            return ServiceResult(
                ok=False,
                op="validate_form",
                error=ServiceError(
                    code="INVALID_JSON",
                    message="Form payload must be a JSON object",
                    detail={"source": source},
                ),
            )
        return self.validate_form(payload, source=source)

    def validate_form_file(self, path: Path) -> ServiceResult:
        """Read *path* as a JSON form payload and validate it."""
        raw, error = self._read(path, op="validate_form")
        if error is not None:
            return error
        return self.validate_form_json(raw, source=str(path))

    def normalize_text(self, raw_text: str, *, source: str = STDIN_SOURCE) -> ServiceResult:
        """Validate raw text and re-render it in the canonical template layout."""
        outcome = self._validate(raw_text)
        if not outcome.ok:
            return self._to_result("normalize", outcome, source)
        assert outcome.report is not None
        text = render_report(outcome.report, project_root=self.project_root)
        return ServiceResult(
            ok=True,
            op="normalize",
            data={"source": source, "text": text},
            warnings=[_describe(w.line, w.message) for w in outcome.warnings],
        )

    def normalize_file(self, path: Path) -> ServiceResult:
        """Read *path* and normalize its contents."""
        raw, error = self._read(path, op="normalize")
        if error is not None:
            return error
        return self.normalize_text(raw, source=str(path))

    def blank_template(self) -> ServiceResult:
        """Return the empty issue template."""
        text = render_blank_template(project_root=self.project_root)
        return ServiceResult(ok=True, op="template", data={"text": text})

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _validate(self, raw_text: str) -> IntakeResult:
        intake = self._settings.intake
        return validate(
            raw_text,
            required=intake.required,
            keep_comments=not intake.strip_comments,
        )

    def _read(self, path: Path, *, op: str) -> tuple[str, ServiceResult | None]:
        """Read a UTF-8 file, converting I/O failures into error results."""
        try:
            return path.read_text(encoding="utf-8"), None
        except FileNotFoundError:
            return "", ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="FILE_NOT_FOUND",
                    message=f"No such file: {path}",
                    detail={"source": str(path)},
                ),
            )
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to read %s", path, exc_info=True)
            return "", ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="READ_ERROR",
                    message=f"Cannot read {path}: {exc}",
                    detail={"source": str(path)},
                ),
            )

    def _to_result(self, op: str, outcome: IntakeResult, source: str) -> ServiceResult:
        warnings = [_describe(w.line, w.message) for w in outcome.warnings]
        meta = {
            "error_count": len(outcome.fatal),
            "warning_count": len(outcome.warnings),
        }
        if outcome.ok:
            assert outcome.report is not None
            logger.debug("Validated report from %s", source)
            return ServiceResult(
                ok=True,
                op=op,
                data={"source": source, "report": outcome.report.model_dump(mode="json")},
                warnings=warnings,
                meta=meta,
            )

        fatal = outcome.fatal
        logger.info("Rejected report from %s with %d error(s)", source, len(fatal))
        noun = "error" if len(fatal) == 1 else "errors"
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings,
            error=ServiceError(
                code="VALIDATION_FAILED",
                message=f"{len(fatal)} {noun} in bug report",
                detail={
                    "source": source,
                    "errors": [e.model_dump(mode="json") for e in outcome.errors],
                },
            ),
            meta=meta,
        )

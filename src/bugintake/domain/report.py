"""BugReport record, field-level errors, and the intake result.

All models use Pydantic with frozen config for immutability.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, field_validator

from bugintake.domain.sections import Section


class ErrorKind(StrEnum):
    """Classes of problems the intake parser reports."""

    EMPTY_DOCUMENT = "empty_document"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    UNRECOGNIZED_HEADER = "unrecognized_header"
    DUPLICATE_SECTION = "duplicate_section"


class Severity(StrEnum):
    """Fatal errors reject the report; warnings are informational."""

    ERROR = "error"
    WARNING = "warning"


class FieldError(BaseModel):
    """One validation problem, tied to a field and optionally a line."""

    model_config = {"frozen": True}

    kind: ErrorKind
    field: str
    message: str
    severity: Severity = Severity.ERROR
    line: int | None = None

    @property
    def is_fatal(self) -> bool:
        return self.severity == Severity.ERROR


class BugReport(BaseModel):
    """A validated bug report.

    ``description`` and ``expected_behavior`` are non-empty after
    trimming. Optional text fields are ``None`` when left blank.
    """

    model_config = {"frozen": True}

    description: str
    affected_version: str | None = None
    python_version: str | None = None
    operating_system: str | None = None
    reproduction_steps: tuple[str, ...] = ()
    expected_behavior: str
    logs: str | None = None

    @field_validator("description", "expected_behavior")
    @classmethod
    def _require_text(cls, value: str) -> str:
        text = value.strip()
        if not text:
            msg = "must not be empty"
            raise ValueError(msg)
        return text

    @field_validator("affected_version", "python_version", "operating_system", "logs")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("reproduction_steps")
    @classmethod
    def _clean_steps(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(step.strip() for step in value if step.strip())

    def section_bodies(self) -> list[tuple[Section, str]]:
        """Return ``(section, body)`` pairs in template order.

        Bodies are laid out so that parsing them back yields the same
        field values: steps are numbered, continuation lines indented,
        and the Python version sits on its own labeled line.
        """
        version_lines = [self.affected_version] if self.affected_version else []
        if self.python_version:
            version_lines.append(f"Python version: {self.python_version}")

        step_lines: list[str] = []
        for number, step in enumerate(self.reproduction_steps, start=1):
            first, *rest = step.split("\n")
            step_lines.append(f"{number}. {first}")
            step_lines.extend(f"   {line}" for line in rest)

        return [
            (Section.DESCRIPTION, self.description),
            (Section.AFFECTED_VERSION, "\n".join(version_lines)),
            (Section.OPERATING_SYSTEM, self.operating_system or ""),
            (Section.REPRODUCTION_STEPS, "\n".join(step_lines)),
            (Section.EXPECTED_BEHAVIOR, self.expected_behavior),
            (Section.LOGS, self.logs or ""),
        ]


class IntakeResult(BaseModel):
    """Outcome of validating one submission.

    ``errors`` holds every problem found, warnings included, in the
    order they were detected. ``report`` is set only when no fatal
    error was found.
    """

    model_config = {"frozen": True}

    report: BugReport | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.report is not None and not any(e.is_fatal for e in self.errors)

    @property
    def fatal(self) -> tuple[FieldError, ...]:
        return tuple(e for e in self.errors if e.is_fatal)

    @property
    def warnings(self) -> tuple[FieldError, ...]:
        return tuple(e for e in self.errors if not e.is_fatal)

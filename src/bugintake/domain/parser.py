"""Intake parser — raw report text or form payload to a validated BugReport.

Scanning is a single left-to-right line walk:

1. HTML comments (the template's placeholder prompts) are blanked out,
   keeping line numbers stable.
2. Each line outside a fenced code block is tested as a header: a
   markdown heading, a bold-only line, or a bare line equal to a label.
3. Known headers open a section; body lines accumulate until the next
   known header. Marked-up headers with an unknown label are reported
   as warnings and kept as body text.

Every problem is collected. Nothing here raises for bad input, and
nothing touches shared state, so :func:`validate` is safe to call
from any number of threads.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic.alias_generators import to_camel

from bugintake.domain.report import BugReport, ErrorKind, FieldError, IntakeResult, Severity
from bugintake.domain.sections import (
    FIELD_ORDER,
    REQUIRED_FIELDS,
    SECTION_LABELS,
    Section,
    normalize_label,
    section_for_label,
)
from bugintake.domain.steps import parse_steps, split_python_version

logger = logging.getLogger(__name__)

_ATX_HEADING = re.compile(r"^\s{0,3}#{1,6}\s+(?P<label>.+?)(?:\s+#+)?\s*$")
_BOLD_LINE = re.compile(r"^\s*(?P<mark>\*\*|__)(?P<label>[^*_]+?)(?P=mark)\s*:?\s*$")
_FENCE = re.compile(r"^\s{0,3}(?:```|~~~)")
_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)

DOCUMENT_FIELD = "document"


@dataclass(frozen=True)
class _HeaderCandidate:
    label: str
    marked: bool  # heading or bold markup, as opposed to a bare line


def _header_candidate(line: str) -> _HeaderCandidate | None:
    """Classify *line* as a possible section header."""
    if not line.strip():
        return None
    for pattern in (_ATX_HEADING, _BOLD_LINE):
        match = pattern.match(line)
        if match is not None:
            return _HeaderCandidate(label=match.group("label"), marked=True)
    return _HeaderCandidate(label=line, marked=False)


def strip_comments(text: str) -> str:
    """Blank out ``<!-- ... -->`` comments, preserving line breaks."""
    return _HTML_COMMENT.sub(lambda m: "\n" * m.group(0).count("\n"), text)


def _empty_document(issues: Iterable[FieldError] = ()) -> IntakeResult:
    empty = FieldError(
        kind=ErrorKind.EMPTY_DOCUMENT,
        field=DOCUMENT_FIELD,
        message="The submitted report is empty.",
    )
    return IntakeResult(errors=(empty, *issues))


# ---------------------------------------------------------------------------
# Section scan
# ---------------------------------------------------------------------------


def split_sections(text: str) -> tuple[dict[Section, str], list[FieldError]]:
    """Split *text* into trimmed section bodies keyed by section.

    Returns the bodies of every known header found plus the warnings
    raised while scanning, in line order.
    """
    bodies: dict[Section, list[str]] = {}
    issues: list[FieldError] = []
    current: Section | None = None
    in_fence = False

    for lineno, line in enumerate(text.splitlines(), start=1):
        if _FENCE.match(line):
            in_fence = not in_fence
        elif not in_fence:
            candidate = _header_candidate(line)
            section = section_for_label(candidate.label) if candidate else None
            if section is not None:
                if section in bodies:
                    issues.append(
                        FieldError(
                            kind=ErrorKind.DUPLICATE_SECTION,
                            field=section.value,
                            message=f"Section '{section.label}' appears more than once; "
                            "bodies were merged.",
                            severity=Severity.WARNING,
                            line=lineno,
                        )
                    )
                    bodies[section].append("")
                else:
                    bodies[section] = []
                current = section
                continue
            if candidate is not None and candidate.marked:
                issues.append(
                    FieldError(
                        kind=ErrorKind.UNRECOGNIZED_HEADER,
                        field=current.value if current else DOCUMENT_FIELD,
                        message=f"Unrecognized header '{candidate.label.strip()}'.",
                        severity=Severity.WARNING,
                        line=lineno,
                    )
                )

        if current is not None:
            bodies[current].append(line)
        elif line.strip():
            logger.debug("Ignoring text before first section at line %d", lineno)

    return {section: "\n".join(lines).strip() for section, lines in bodies.items()}, issues


# ---------------------------------------------------------------------------
# Field assembly
# ---------------------------------------------------------------------------


def _fields_from_sections(bodies: Mapping[Section, str]) -> dict[str, Any]:
    version_text, python_version = split_python_version(bodies.get(Section.AFFECTED_VERSION, ""))
    return {
        "description": bodies.get(Section.DESCRIPTION, ""),
        "affected_version": version_text or None,
        "python_version": python_version,
        "operating_system": bodies.get(Section.OPERATING_SYSTEM) or None,
        "reproduction_steps": tuple(parse_steps(bodies.get(Section.REPRODUCTION_STEPS, ""))),
        "expected_behavior": bodies.get(Section.EXPECTED_BEHAVIOR, ""),
        "logs": bodies.get(Section.LOGS) or None,
    }


def _field_label(name: str) -> str:
    if name == "python_version":
        return "Python version"
    return SECTION_LABELS[Section(name)]


def _missing_fields(values: Mapping[str, Any], required: Iterable[str]) -> list[FieldError]:
    """Report required fields that are absent or blank, in document order."""
    wanted = REQUIRED_FIELDS | set(required)
    errors: list[FieldError] = []
    for name in FIELD_ORDER:
        if name not in wanted:
            continue
        value = values.get(name)
        if isinstance(value, str):
            value = value.strip()
        if not value:
            errors.append(
                FieldError(
                    kind=ErrorKind.MISSING_REQUIRED_FIELD,
                    field=name,
                    message=f"Required section '{_field_label(name)}' is missing or empty.",
                )
            )
    return errors


def _finish(
    values: dict[str, Any],
    issues: list[FieldError],
    required: Iterable[str],
) -> IntakeResult:
    issues.extend(_missing_fields(values, required))
    if any(issue.is_fatal for issue in issues):
        return IntakeResult(errors=tuple(issues))
    return IntakeResult(report=BugReport(**values), errors=tuple(issues))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate(
    raw_text: str,
    *,
    required: Iterable[str] = (),
    keep_comments: bool = False,
) -> IntakeResult:
    """Parse and validate a submitted report.

    Args:
        raw_text: Full text of the submission.
        required: Fields required in addition to ``description`` and
            ``expected_behavior``.
        keep_comments: Keep ``<!-- -->`` comments instead of stripping them.

    Returns:
        An :class:`IntakeResult` carrying the report when no fatal error
        was found, and every error and warning in detection order.
    """
    text = raw_text if keep_comments else strip_comments(raw_text)
    if not text.strip():
        return _empty_document()

    bodies, issues = split_sections(text)
    logger.debug("Found sections: %s", ", ".join(s.value for s in bodies))
    return _finish(_fields_from_sections(bodies), issues, required)


# Accepted form keys: field names, camelCase aliases, and template labels.
_FORM_KEYS: dict[str, str] = {}
for _name in FIELD_ORDER:
    _FORM_KEYS[_name.casefold()] = _name
    _FORM_KEYS[to_camel(_name).casefold()] = _name
for _section, _label in SECTION_LABELS.items():
    _FORM_KEYS[normalize_label(_label)] = _section.value
_FORM_KEYS["python version"] = "python_version"


def _form_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def validate_form(
    payload: Mapping[str, Any],
    *,
    required: Iterable[str] = (),
) -> IntakeResult:
    """Validate a structured form payload.

    Keys may be field names (``affected_version``), camelCase aliases
    (``affectedVersion``) or template labels (``Affected version``).
    ``reproduction_steps`` accepts a list of strings or a block of
    numbered lines; either way each entry goes through the step rules,
    and ``affected_version`` gives up its Python line as the text path
    does. Unknown keys are reported as warnings.
    """
    values: dict[str, Any] = {}
    issues: list[FieldError] = []

    for key, value in payload.items():
        name = _FORM_KEYS.get(normalize_label(str(key)))
        if name is None:
            issues.append(
                FieldError(
                    kind=ErrorKind.UNRECOGNIZED_HEADER,
                    field=str(key),
                    message=f"Unrecognized form field '{key}'.",
                    severity=Severity.WARNING,
                )
            )
            continue
        if name in values:
            issues.append(
                FieldError(
                    kind=ErrorKind.DUPLICATE_SECTION,
                    field=name,
                    message=f"Form field '{key}' duplicates an earlier key; later value wins.",
                    severity=Severity.WARNING,
                )
            )
        if name == "reproduction_steps":
            entries = value if isinstance(value, (list, tuple)) else [value]
            values[name] = tuple(
                step for entry in entries for step in parse_steps(_form_text(entry))
            )
        else:
            values[name] = _form_text(value) or None

    if values.get("affected_version"):
        # Same split as the text path; an explicit python_version key wins.
        version_text, python_version = split_python_version(values["affected_version"])
        values["affected_version"] = version_text or None
        if not values.get("python_version"):
            values["python_version"] = python_version

    if not any(values.values()):
        return _empty_document(issues)

    values.setdefault("description", "")
    values.setdefault("expected_behavior", "")
    return _finish(values, issues, required)

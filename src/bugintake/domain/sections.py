"""Template sections, their labels, and header label matching.

The bug-report template has six labeled sections. Each maps to one
field of :class:`~bugintake.domain.report.BugReport`, except the
affected-version section which also carries ``python_version``.
"""

from __future__ import annotations

import re
from enum import StrEnum


class Section(StrEnum):
    """Known template sections, in template order."""

    DESCRIPTION = "description"
    AFFECTED_VERSION = "affected_version"
    OPERATING_SYSTEM = "operating_system"
    REPRODUCTION_STEPS = "reproduction_steps"
    EXPECTED_BEHAVIOR = "expected_behavior"
    LOGS = "logs"

    @property
    def label(self) -> str:
        """The header label as it appears in the template."""
        return SECTION_LABELS[self]

    @property
    def prompt(self) -> str:
        """The placeholder prompt shown under the header in the blank template."""
        return SECTION_PROMPTS[self]


SECTION_LABELS: dict[Section, str] = {
    Section.DESCRIPTION: "Describe the bug",
    Section.AFFECTED_VERSION: "Affected version",
    Section.OPERATING_SYSTEM: "Operating System",
    Section.REPRODUCTION_STEPS: "To Reproduce",
    Section.EXPECTED_BEHAVIOR: "Expected behavior",
    Section.LOGS: "Logs and outputs",
}

SECTION_PROMPTS: dict[Section, str] = {
    Section.DESCRIPTION: "A clear and concise description of what the bug is.",
    Section.AFFECTED_VERSION: (
        "Which version are you running? Add a line 'Python version: X.Y' if relevant."
    ),
    Section.OPERATING_SYSTEM: "Which operating system and version are you using?",
    Section.REPRODUCTION_STEPS: (
        "Steps to reproduce the behavior, one numbered line per step:\n"
        "1. Run '...'\n"
        "2. See error"
    ),
    Section.EXPECTED_BEHAVIOR: "A clear and concise description of what you expected to happen.",
    Section.LOGS: "Paste any relevant logs or command output, ideally inside a code block.",
}

# BugReport fields in document order. python_version lives in the
# affected-version section, directly after the version text.
FIELD_ORDER: tuple[str, ...] = (
    "description",
    "affected_version",
    "python_version",
    "operating_system",
    "reproduction_steps",
    "expected_behavior",
    "logs",
)

REQUIRED_FIELDS: frozenset[str] = frozenset({"description", "expected_behavior"})

_WHITESPACE = re.compile(r"\s+")


def normalize_label(text: str) -> str:
    """Normalize header text for comparison.

    Strips surrounding whitespace and a trailing colon, collapses inner
    whitespace, and casefolds.

    Examples:
        >>> normalize_label("  Expected   Behavior: ")
        'expected behavior'
    """
    text = text.strip().rstrip(":").strip()
    return _WHITESPACE.sub(" ", text).casefold()


_LABEL_INDEX: dict[str, Section] = {
    normalize_label(label): section for section, label in SECTION_LABELS.items()
}


def section_for_label(text: str) -> Section | None:
    """Return the section whose label matches *text* exactly, ignoring case."""
    return _LABEL_INDEX.get(normalize_label(text))

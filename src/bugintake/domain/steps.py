"""Reproduction step splitting and affected-version line handling."""

from __future__ import annotations

import re

# "1. open app" or "2) click X"; the text after the marker may be empty.
_STEP_PREFIX = re.compile(r"^\s*\d+[.)](?:\s+(?P<text>.*))?$")

# "Python version: 3.12", "- python: 3.11.4"
_PYTHON_VERSION_LINE = re.compile(
    r"^\s*(?:[-*+]\s+)?python(?:\s+version)?\s*:\s*(?P<value>.*?)\s*$",
    re.IGNORECASE,
)


def parse_steps(body: str) -> list[str]:
    """Split a reproduction body into ordered steps.

    A numbered line starts a new step. Any other non-blank line is
    continuation text appended to the prior step; before the first
    numbered line it starts a step of its own.

    Examples:
        >>> parse_steps("1. open app\\n2. click X\\n3. crash")
        ['open app', 'click X', 'crash']
        >>> parse_steps("1. run it\\n   with --debug\\n2. boom")
        ['run it\\nwith --debug', 'boom']
    """
    steps: list[list[str]] = []
    for raw in body.splitlines():
        line = raw.strip()
        if not line:
            continue
        match = _STEP_PREFIX.match(line)
        if match is not None:
            text = (match.group("text") or "").strip()
            steps.append([text] if text else [])
        elif steps:
            steps[-1].append(line)
        else:
            steps.append([line])
    return ["\n".join(parts) for parts in steps if parts]


def split_python_version(body: str) -> tuple[str, str | None]:
    """Separate a ``Python version: X`` line from affected-version text.

    Returns ``(version_text, python_version)``. Only the first Python
    line is extracted; later ones stay in the version text.
    """
    python_version: str | None = None
    remaining: list[str] = []
    for line in body.splitlines():
        if python_version is None:
            match = _PYTHON_VERSION_LINE.match(line)
            if match is not None:
                python_version = match.group("value") or None
                continue
        remaining.append(line)
    return "\n".join(remaining).strip(), python_version

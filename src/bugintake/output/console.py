"""Rich Console factory and theme for bugintake output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

INTAKE_THEME = Theme(
    {
        "intake.ok": "bold green",
        "intake.error": "bold red",
        "intake.warning": "bold yellow",
        "intake.op": "bold cyan",
        "intake.key": "dim",
        "intake.field": "bold blue",
        "intake.line": "magenta",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "error": "intake.error",
    "warning": "intake.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=INTAKE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(severity: str) -> str:
    """Return the Rich style name for an error severity."""
    return _SEVERITY_STYLES.get(severity, "")

"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested
output mode. Operations that produce a document (``normalize``,
``template``) print the document itself so it can be piped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bugintake.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from bugintake.services.result import ServiceResult

DOCUMENT_OPS = frozenset({"normalize", "template"})


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok and result.op in DOCUMENT_OPS:
        return str(result.data.get("text", "")).rstrip("\n")
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)

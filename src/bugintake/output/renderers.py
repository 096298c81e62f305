"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bugintake.output.console import create_console, get_output, style_for_severity

if TYPE_CHECKING:
    from rich.console import Console

    from bugintake.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="intake.ok")
    op = Text(f"  {result.op}", style="intake.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field.

    Multi-line values start on the next line, indented under the key.
    """
    text = str(value)
    if "\n" not in text:
        console.print(Text.assemble((f"  {key}: ", "intake.key"), text))
        return
    console.print(Text(f"  {key}:", style="intake.key"))
    for line in text.split("\n"):
        console.print(Text(f"    {line}"), soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_errors_table(console: Console, errors: list[dict[str, Any]]) -> None:
    """Print field errors as a table in detection order."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("LINE", justify="right", style="intake.line")
    table.add_column("SEVERITY")
    table.add_column("KIND")
    table.add_column("FIELD", style="intake.field")
    table.add_column("MESSAGE")
    for err in errors:
        line = err.get("line")
        severity = str(err.get("severity", ""))
        table.add_row(
            "" if line is None else str(line),
            Text(severity, style=style_for_severity(severity)),
            str(err.get("kind", "")),
            str(err.get("field", "")),
            str(err.get("message", "")),
        )
    console.print(table)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="intake.error")
    op = Text(f"  {result.op}", style="intake.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    errors = err.detail.get("errors") if err else None
    if errors:
        _render_errors_table(console, errors)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k != "errors":
                console.print(Text(f"    {k}: {v}"))


def _render_report(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a validated report field by field."""
    _status_line(console, result)
    if "source" in result.data:
        _field(console, "source", result.data["source"])

    report: dict[str, Any] = result.data.get("report") or {}
    for key, value in report.items():
        if key == "reproduction_steps":
            steps = [f"{n}. {step}" for n, step in enumerate(value or [], start=1)]
            _field(console, key, "\n".join(steps) if steps else "-")
        else:
            _field(console, key, "-" if value is None else value)

    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_report,
    "validate_form": _render_report,
}

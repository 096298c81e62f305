"""Command: validate a submitted bug report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bugintake.commands._base import IntakeCommand
from bugintake.commands._context import STDIN_ARG

if TYPE_CHECKING:
    from bugintake.commands._context import AppContext


@click.command(
    cls=IntakeCommand,
    examples="""\
  bugintake validate report.md
  cat report.md | bugintake validate
  bugintake --json validate report.md
  bugintake validate --form payload.json""",
)
@click.argument("source", default=STDIN_ARG, metavar="[SOURCE]")
@click.option("--form", is_flag=True, help="Treat SOURCE as a JSON form payload.")
@click.pass_obj
def validate(app: AppContext, source: str, form: bool) -> None:
    """Validate a bug report read from SOURCE (a file, or '-' for stdin).

    Exits with status 1 when the report is rejected; every problem found
    is listed, not just the first.
    """
    svc = app.service
    path = app.source_path(source)

    if form:
        if path is None:
            app.emit(svc.validate_form_json(app.read_stdin()))
        else:
            app.emit(svc.validate_form_file(path))
    elif path is None:
        app.emit(svc.validate_text(app.read_stdin()))
    else:
        app.emit(svc.validate_file(path))

"""Command: re-render a bug report in the canonical template layout."""

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
  bugintake normalize report.md
  bugintake normalize report.md > clean.md
  cat report.md | bugintake normalize""",
)
@click.argument("source", default=STDIN_ARG, metavar="[SOURCE]")
@click.pass_obj
def normalize(app: AppContext, source: str) -> None:
    """Validate SOURCE and print it in the canonical template layout."""
    path = app.source_path(source)
    if path is None:
        app.emit(app.service.normalize_text(app.read_stdin()))
    else:
        app.emit(app.service.normalize_file(path))

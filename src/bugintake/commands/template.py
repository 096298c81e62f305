"""Command: print the blank bug-report template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bugintake.commands._base import IntakeCommand

if TYPE_CHECKING:
    from bugintake.commands._context import AppContext


@click.command(
    cls=IntakeCommand,
    examples="""\
  bugintake template
  bugintake template > .github/ISSUE_TEMPLATE/bug_report.md""",
)
@click.pass_obj
def template(app: AppContext) -> None:
    """Print the blank bug-report issue template."""
    app.emit(app.service.blank_template())

"""Subcommand modules for bugintake.

Provides register_commands() which uses deferred imports to keep
``bugintake --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from bugintake.commands.normalize import normalize
    from bugintake.commands.template import template
    from bugintake.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(normalize)
    cli.add_command(template)

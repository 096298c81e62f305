"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the intake service, input reading, and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bugintake.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bugintake.config.settings import BugintakeSettings
    from bugintake.services.intake import IntakeService
    from bugintake.services.result import ServiceResult

STDIN_ARG = "-"


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: BugintakeSettings) -> None:
        self.settings = settings
        self._service: IntakeService | None = None

        from bugintake.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> IntakeService:
        """The intake service (created lazily on first access)."""
        if self._service is None:
            from bugintake.services.intake import IntakeService

            self._service = IntakeService(self.settings)
        return self._service

    @staticmethod
    def source_path(source: str) -> Path | None:
        """Return the path for a SOURCE argument, or None for stdin."""
        if source == STDIN_ARG:
            return None
        return Path(source)

    @staticmethod
    def read_stdin() -> str:
        with click.open_file(STDIN_ARG) as stream:
            return stream.read()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

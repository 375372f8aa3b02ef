"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup and result emission (stdout/stderr
routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefrontctl.config.logging import configure_logging
from storefrontctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from storefrontctl.config.settings import StorefrontSettings
    from storefrontctl.services.result import ServiceResult


class AppContext:
    """Settings plus output plumbing, shared by every subcommand."""

    def __init__(self, settings: StorefrontSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit_warnings(self, result: ServiceResult) -> None:
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                self.emit_warnings(result)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

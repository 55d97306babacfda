"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Plugins are loaded lazily on first service access so
``--help`` and ``--version`` never import plugin code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scalarctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from scalarctl.config.settings import ScalarSettings
    from scalarctl.services.result import ServiceResult
    from scalarctl.services.scalars import ScalarService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ScalarSettings) -> None:
        self.settings = settings
        self._service: ScalarService | None = None

        from scalarctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ScalarService:
        """The scalar service (plugins are loaded on first access)."""
        if self._service is None:
            from scalarctl.services.scalars import ScalarService

            if self.settings.plugins.enabled:
                from scalarctl.plugins.manager import PluginManager

                PluginManager().discover_and_load(local_dir=Path(self.settings.plugins.local_dir))
            self._service = ScalarService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. Warnings go to stderr unless
          they are already part of the JSON payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

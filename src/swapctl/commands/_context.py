"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns the lazily-loaded price store and the single
place results are written out (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swapctl.config.logging import configure_logging
from swapctl.output.formatters import OutputSettings, format_result
from swapctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from swapctl.config.settings import SwapSettings
    from swapctl.infrastructure.price_store import PriceStore
    from swapctl.services.result import ServiceResult


class AppContext:
    """State shared by every command in one invocation.

    The price store is created on first use, so ``--help``, ``--version``
    and the amount commands never read price data.
    """

    def __init__(self, settings: SwapSettings) -> None:
        self.settings = settings
        self._store: PriceStore | None = None

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json or settings.json_output,
        )
        if settings.verbose:
            enable_telemetry()

    @property
    def store(self) -> PriceStore:
        if self._store is None:
            from swapctl.infrastructure.price_store import PriceStore

            self._store = PriceStore(self.settings)
        return self._store

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult out and set the exit status.

        * Success: stdout; warnings go to stderr outside JSON mode so piped
          output stays clean.
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

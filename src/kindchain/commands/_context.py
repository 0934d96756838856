"""Per-invocation state shared by every subcommand via ``ctx.obj``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import click

from kindchain.config.logging import configure_logging
from kindchain.output.formatters import OutputSettings, format_result
from kindchain.services.kinds import KindService

if TYPE_CHECKING:
    from kindchain.config.settings import KindchainSettings
    from kindchain.services.result import ServiceResult


@dataclass
class AppContext:
    """Settings, a :class:`KindService` bound to their separator, and ``emit``."""

    settings: KindchainSettings
    service: KindService = field(init=False)

    def __post_init__(self) -> None:
        configure_logging(verbose=self.settings.verbose, log_json=self.settings.log_json)
        self.service = KindService(self.settings.separator)

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with status 1.

        Warnings of a successful result are printed to stderr after it,
        unless ``--json`` (they are in the payload) or ``--quiet``.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            click.get_current_context().exit(1)
        if self.settings.json_output or self.settings.quiet:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

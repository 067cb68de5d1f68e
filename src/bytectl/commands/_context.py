"""Per-invocation state handed to every command through ``@click.pass_obj``."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from bytectl.config.logging import configure_logging
from bytectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bytectl.config.settings import BytectlSettings
    from bytectl.services.bitops import BitOpsService
    from bytectl.services.result import ServiceResult

EXIT_FAILURE = 1


class AppContext:
    """Resolved settings, the configured service, and result emission."""

    def __init__(self, settings: BytectlSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            shift_mode=settings.ops.shift_mode.value,
        )

    @cached_property
    def service(self) -> BitOpsService:
        from bytectl.services.bitops import BitOpsService

        return BitOpsService(self.settings.ops, self.settings.display)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and decide the exit status.

        The rendered result goes to stdout, or to stderr when it failed.
        Warnings follow on stderr unless ``--json`` already carries them.
        A failed result exits 1, and so does a result with warnings when
        ``[ops] strict`` is on.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if result.ok and not self.output.json_output:
            for warning in result.warnings:
                click.secho(f"WARNING: {warning}", fg="yellow", err=True)
        if not result.ok or (result.warnings and self.settings.ops.strict):
            raise SystemExit(EXIT_FAILURE)

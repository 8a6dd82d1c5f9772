"""The object every dtlfmt subcommand receives through ``@click.pass_obj``."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from dtlfmt.config.logging import configure_logging
from dtlfmt.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dtlfmt.config.settings import DtlSettings
    from dtlfmt.services.result import ServiceResult
    from dtlfmt.services.rules import RuleService


class AppContext:
    """Settings, the rule service, and result emission for one CLI run.

    Logging is configured as soon as the root group has its flags; the
    service is only built when a subcommand asks for it.
    """

    def __init__(self, settings: DtlSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def service(self) -> RuleService:
        from dtlfmt.services.rules import RuleService

        return RuleService(self.settings)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successful output goes to stdout so it can be piped into another
        command; warnings go to stderr, except in JSON mode where they are
        part of the payload. A failure is printed to stderr and exits 1.
        """
        output_settings = self.output_settings
        rendered = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)

        click.echo(rendered)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

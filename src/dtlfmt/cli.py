"""Entry point: the root ``dtlfmt`` group and its global flags."""

from __future__ import annotations

import click

from dtlfmt import __version__
from dtlfmt.commands import register_commands
from dtlfmt.commands._context import AppContext
from dtlfmt.config.settings import DtlSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dtlfmt")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (the DTL line only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject tokens outside the grammar instead of skipping them.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    strict: bool | None,
    config_path: str | None,
) -> None:
    """dtlfmt: parse, format, and edit pipe-delimited DTL rule expressions.

    Every command that takes TEXT also accepts - to read it from stdin.
    """
    flags: dict[str, bool] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset --strict/--lenient defers to env vars and [parser] strict.
    if strict is not None:
        flags["strict"] = strict
    settings = DtlSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Command: re-render DTL text in canonical form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtlfmt.commands._base import DTL_TEXT, DtlCommand

if TYPE_CHECKING:
    from dtlfmt.commands._context import AppContext


@click.command(
    "format",
    cls=DtlCommand,
    examples="""\
  dtlfmt format "rule | country | in | US | or | Rule | appversion | gte | 2.0"
  dtlfmt -q format "Rule|a|equals|1|and|b|equals|2"
  pbpaste | dtlfmt -q format -""",
)
@click.argument("text", type=DTL_TEXT)
@click.pass_obj
def format_cmd(app: AppContext, text: str) -> None:
    """Normalize DTL TEXT (or - for stdin): operator case and whitespace."""
    app.emit(app.service.format(text))

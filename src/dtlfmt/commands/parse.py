"""Command: parse DTL text and show its rule tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtlfmt.commands._base import DTL_TEXT, DtlCommand

if TYPE_CHECKING:
    from dtlfmt.commands._context import AppContext


@click.command(
    cls=DtlCommand,
    examples="""\
  dtlfmt parse "Rule|country|in|US|OR|Rule|appversion|gte|2.0"
  dtlfmt --json parse "Rule|a|equals|1|AND|b|equals|2"
  dtlfmt --strict parse "Rule|country|in|US"
  cat rule.dtl | dtlfmt parse -""",
)
@click.argument("text", type=DTL_TEXT)
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse DTL TEXT (or - for stdin) into rules and clauses."""
    app.emit(app.service.parse(text))

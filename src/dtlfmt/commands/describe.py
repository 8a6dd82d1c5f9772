"""Command: describe a comparison operator."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtlfmt.commands._base import DtlCommand

if TYPE_CHECKING:
    from dtlfmt.commands._context import AppContext


@click.command(
    cls=DtlCommand,
    examples="""\
  dtlfmt describe gte
  dtlfmt -q describe IN""",
)
@click.argument("operator")
@click.pass_obj
def describe(app: AppContext, operator: str) -> None:
    """Show the human-readable description of OPERATOR."""
    app.emit(app.service.describe(operator))

"""Command: list supported operators."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtlfmt.commands._base import DtlCommand

if TYPE_CHECKING:
    from dtlfmt.commands._context import AppContext


@click.command(cls=DtlCommand, examples="  dtlfmt operators\n  dtlfmt --json operators")
@click.pass_obj
def operators(app: AppContext) -> None:
    """List comparison and logical operators."""
    app.emit(app.service.operators())

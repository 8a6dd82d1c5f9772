"""Command: start a new expression from scratch."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtlfmt.commands._base import DtlCommand

if TYPE_CHECKING:
    from dtlfmt.commands._context import AppContext


@click.command(cls=DtlCommand, examples="  dtlfmt new\n  dtlfmt -q new")
@click.pass_obj
def new(app: AppContext) -> None:
    """Create one rule with one default clause (see [editor] scratch_clause)."""
    app.emit(app.service.scratch())

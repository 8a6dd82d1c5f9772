"""Subcommand modules for dtlfmt.

Provides register_commands() which uses deferred imports to keep
``dtlfmt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the edit group and the standalone commands on the root CLI group."""
    # --- Groups ---
    from dtlfmt.commands.edit import edit

    cli.add_command(edit)

    # --- Standalone commands ---
    from dtlfmt.commands.describe import describe
    from dtlfmt.commands.format_cmd import format_cmd
    from dtlfmt.commands.new import new
    from dtlfmt.commands.operators import operators
    from dtlfmt.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(format_cmd)
    cli.add_command(describe)
    cli.add_command(operators)
    cli.add_command(new)

"""Command group: apply one edit to DTL text and print the result.

Indexes are zero-based, matching the numbers in the ``parse`` tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtlfmt.commands._base import DTL_TEXT, DtlGroup

if TYPE_CHECKING:
    from dtlfmt.commands._context import AppContext

_OPERATOR_CHOICE = click.Choice(["AND", "OR"], case_sensitive=False)


@click.group(
    cls=DtlGroup,
    examples="""\
  dtlfmt edit add-rule "Rule|a|equals|1"
  dtlfmt edit add-clause "Rule|a|equals|1" --rule 0 --operator OR
  dtlfmt edit remove-clause "Rule|a|equals|1|AND|b|equals|2" --rule 0 --clause 1
  dtlfmt edit set-field "Rule|a|equals|1" --rule 0 --clause 0 --field value 42
  dtlfmt edit set-operator "Rule|a|equals|1|OR|Rule|b|equals|2" --slot 0 AND""",
)
def edit() -> None:
    """Edit rules and clauses of a DTL expression."""


@edit.command("add-rule")
@click.argument("text", type=DTL_TEXT)
@click.option("--operator", type=_OPERATOR_CHOICE, default=None, help="Rule operator to join with.")
@click.pass_obj
def add_rule(app: AppContext, text: str, operator: str | None) -> None:
    """Append a rule with one default clause."""
    app.emit(app.service.edit(text, "add_rule", operator=operator))


@edit.command("add-clause")
@click.argument("text", type=DTL_TEXT)
@click.option("--rule", "rule", type=int, required=True, help="Rule index.")
@click.option(
    "--operator", type=_OPERATOR_CHOICE, default=None, help="Clause operator to join with."
)
@click.pass_obj
def add_clause(app: AppContext, text: str, rule: int, operator: str | None) -> None:
    """Append a default clause to a rule."""
    app.emit(app.service.edit(text, "add_clause", rule=rule, operator=operator))


@edit.command("remove-rule")
@click.argument("text", type=DTL_TEXT)
@click.option("--rule", "rule", type=int, required=True, help="Rule index.")
@click.pass_obj
def remove_rule(app: AppContext, text: str, rule: int) -> None:
    """Remove a rule and its joining operator."""
    app.emit(app.service.edit(text, "remove_rule", rule=rule))


@edit.command("remove-clause")
@click.argument("text", type=DTL_TEXT)
@click.option("--rule", "rule", type=int, required=True, help="Rule index.")
@click.option("--clause", "clause", type=int, required=True, help="Clause index.")
@click.pass_obj
def remove_clause(app: AppContext, text: str, rule: int, clause: int) -> None:
    """Remove a clause and its joining operator."""
    app.emit(app.service.edit(text, "remove_clause", rule=rule, clause=clause))


@edit.command("set-field")
@click.argument("text", type=DTL_TEXT)
@click.argument("value")
@click.option("--rule", "rule", type=int, required=True, help="Rule index.")
@click.option("--clause", "clause", type=int, required=True, help="Clause index.")
@click.option(
    "--field",
    type=click.Choice(["property", "operator", "value"]),
    required=True,
    help="Clause field to overwrite.",
)
@click.pass_obj
def set_field(app: AppContext, text: str, value: str, rule: int, clause: int, field: str) -> None:
    """Overwrite one field of a clause with VALUE."""
    result = app.service.edit(text, "set_field", rule=rule, clause=clause, field=field, value=value)
    app.emit(result)


@edit.command("set-operator")
@click.argument("text", type=DTL_TEXT)
@click.argument("value", type=_OPERATOR_CHOICE)
@click.option("--slot", type=int, required=True, help="Operator slot index.")
@click.option("--rule", "rule", type=int, default=None, help="Edit a clause operator of this rule.")
@click.pass_obj
def set_operator(app: AppContext, text: str, value: str, slot: int, rule: int | None) -> None:
    """Overwrite a rule operator (or, with --rule, a clause operator) with VALUE."""
    app.emit(app.service.edit(text, "set_operator", slot=slot, value=value, rule=rule))

"""In-place editing of an Expression.

Every helper mutates the Expression it is given and keeps the
positional invariant: adding an item after an existing one records a
joining operator; removing an item drops the operator slot at the same
index, or the one before it when the item was last.

Clause fields are not validated here; an edited operator is only
checked the next time the text is parsed.
"""

from __future__ import annotations

from typing import Literal

from dtlfmt.domain.errors import EditError
from dtlfmt.domain.model import Clause, Expression, Rule
from dtlfmt.domain.operators import LogicalOperator, is_logical_operator

ClauseField = Literal["property", "operator", "value"]

SCRATCH_CLAUSE = Clause(property="property", operator="equals", value="value")
NEW_RULE_CLAUSE = Clause(property="newproperty", operator="equals", value="newvalue")
NEW_CLAUSE = Clause(property="property", operator="equals", value="value")

CLAUSE_FIELDS: tuple[str, ...] = ("property", "operator", "value")


def _remove_with_slot(items: list, operators: list[str], index: int) -> None:
    items.pop(index)
    if index < len(operators):
        operators.pop(index)
    elif index > 0 and index - 1 < len(operators):
        operators.pop(index - 1)


def _normalize_operator(operator: str) -> str:
    if not is_logical_operator(operator):
        msg = f"Unsupported logical operator '{operator}'. Supported operators: AND, OR"
        raise EditError(msg, operator=operator)
    return operator.upper()


def get_rule(expression: Expression, rule_index: int) -> Rule:
    if not 0 <= rule_index < len(expression.rules):
        msg = f"Rule index {rule_index} out of range (expression has {len(expression.rules)} rules)"
        raise EditError(msg, rule_index=rule_index)
    return expression.rules[rule_index]


def get_clause(expression: Expression, rule_index: int, clause_index: int) -> Clause:
    rule = get_rule(expression, rule_index)
    if not 0 <= clause_index < len(rule.clauses):
        msg = (
            f"Clause index {clause_index} out of range "
            f"(rule {rule_index} has {len(rule.clauses)} clauses)"
        )
        raise EditError(msg, rule_index=rule_index, clause_index=clause_index)
    return rule.clauses[clause_index]


def new_expression(clause: Clause | None = None) -> Expression:
    """Start from scratch: one rule holding one default clause."""
    seed = (clause or SCRATCH_CLAUSE).model_copy()
    return Expression(rules=[Rule(clauses=[seed])])


def add_rule(
    expression: Expression,
    clause: Clause | None = None,
    operator: str = LogicalOperator.OR,
) -> Rule:
    """Append a rule with one clause, joined to the last rule by *operator*."""
    joiner = _normalize_operator(operator)
    rule = Rule(clauses=[(clause or NEW_RULE_CLAUSE).model_copy()])
    if expression.rules:
        expression.rule_operators.append(joiner)
    expression.rules.append(rule)
    return rule


def add_clause(
    expression: Expression,
    rule_index: int,
    clause: Clause | None = None,
    operator: str = LogicalOperator.AND,
) -> Clause:
    """Append a clause to a rule, joined to its last clause by *operator*."""
    joiner = _normalize_operator(operator)
    rule = get_rule(expression, rule_index)
    added = (clause or NEW_CLAUSE).model_copy()
    if rule.clauses:
        rule.clause_operators.append(joiner)
    rule.clauses.append(added)
    return added


def remove_rule(expression: Expression, rule_index: int) -> Rule:
    """Remove a rule together with one adjoining rule-operator slot."""
    rule = get_rule(expression, rule_index)
    _remove_with_slot(expression.rules, expression.rule_operators, rule_index)
    return rule


def remove_clause(expression: Expression, rule_index: int, clause_index: int) -> Clause:
    """Remove a clause together with one adjoining clause-operator slot.

    A rule left without clauses is removed as well.
    """
    clause = get_clause(expression, rule_index, clause_index)
    rule = expression.rules[rule_index]
    _remove_with_slot(rule.clauses, rule.clause_operators, clause_index)
    if not rule.clauses:
        remove_rule(expression, rule_index)
    return clause


def set_clause_field(
    expression: Expression,
    rule_index: int,
    clause_index: int,
    field: str,
    value: str,
) -> Clause:
    """Overwrite one field of a clause."""
    if field not in CLAUSE_FIELDS:
        msg = f"Unknown clause field '{field}'. Expected one of: {', '.join(CLAUSE_FIELDS)}"
        raise EditError(msg, field=field)
    clause = get_clause(expression, rule_index, clause_index)
    setattr(clause, field, value)
    return clause


def set_operator(
    expression: Expression,
    slot: int,
    value: str,
    *,
    rule_index: int | None = None,
) -> str:
    """Overwrite a logical-operator slot.

    With *rule_index*, *slot* indexes that rule's clause operators;
    otherwise it indexes the expression's rule operators.
    """
    operator = _normalize_operator(value)
    if rule_index is None:
        operators = expression.rule_operators
        owner = "expression"
    else:
        operators = get_rule(expression, rule_index).clause_operators
        owner = f"rule {rule_index}"
    if not 0 <= slot < len(operators):
        msg = f"Operator slot {slot} out of range ({owner} has {len(operators)} operators)"
        raise EditError(msg, slot=slot, rule_index=rule_index)
    operators[slot] = operator
    return operator

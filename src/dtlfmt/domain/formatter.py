"""DTL formatter — Expression back to canonical single-line text.

Structural inverse of :mod:`dtlfmt.domain.parser`:
``parse(format_expression(e)) == e`` for any well-formed Expression
whose logical operators are upper-case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dtlfmt.domain.operators import RULE_KEYWORD, describe
from dtlfmt.domain.parser import DELIMITER

if TYPE_CHECKING:
    from dtlfmt.domain.model import Expression, Rule

__all__ = ["describe", "format_expression", "format_rule"]


def format_rule(rule: Rule) -> list[str]:
    """Tokens for one rule's clauses and clause operators (no ``Rule`` prefix)."""
    tokens: list[str] = []
    for index, clause in enumerate(rule.clauses):
        tokens.extend((clause.property, clause.operator, clause.value))
        if index < len(rule.clause_operators):
            tokens.append(rule.clause_operators[index])
    return tokens


def format_expression(expression: Expression) -> str:
    """Render *expression* as DTL. Never fails.

    A missing rule-operator slot renders as an empty token.
    """
    tokens: list[str] = []
    for index, rule in enumerate(expression.rules):
        if index > 0:
            operators = expression.rule_operators
            tokens.append(operators[index - 1] if index <= len(operators) else "")
        tokens.append(RULE_KEYWORD)
        tokens.extend(format_rule(rule))
    return DELIMITER.join(tokens)

"""Operator catalog — comparison and logical operators for DTL.

Both sets are matched case-insensitively. Lookups are keyed by the
lower-cased form; the canonical spelling is the enum value.
"""

from __future__ import annotations

from enum import StrEnum


class ComparisonOperator(StrEnum):
    """Operators allowed between a clause's property and value."""

    IN = "in"
    EQUALS = "equals"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


class LogicalOperator(StrEnum):
    """Operators joining clauses within a rule, or rules within an expression."""

    AND = "AND"
    OR = "OR"


RULE_KEYWORD = "Rule"

COMPARISON_OPERATORS: tuple[str, ...] = tuple(op.value for op in ComparisonOperator)
LOGICAL_OPERATORS: tuple[str, ...] = tuple(op.value for op in LogicalOperator)

_COMPARISON_KEYS: frozenset[str] = frozenset(op.lower() for op in COMPARISON_OPERATORS)
_LOGICAL_KEYS: frozenset[str] = frozenset(op.lower() for op in LOGICAL_OPERATORS)

OPERATOR_DESCRIPTIONS: dict[str, str] = {
    "gt": "gt (greater than)",
    "gte": "gte (greater than or equal)",
    "lt": "lt (less than)",
    "lte": "lte (less than or equal)",
    "in": "in (contains)",
    "equals": "equals (exact match)",
}


def is_rule_keyword(token: str) -> bool:
    """Whether *token* is the ``Rule`` keyword (any case)."""
    return token.lower() == RULE_KEYWORD.lower()


def is_comparison_operator(token: str) -> bool:
    """Whether *token* names a supported comparison operator (any case).

    Examples:
        >>> is_comparison_operator("gte")
        True
        >>> is_comparison_operator("GTE")
        True
        >>> is_comparison_operator("between")
        False
    """
    return token.lower() in _COMPARISON_KEYS


def is_logical_operator(token: str) -> bool:
    """Whether *token* is ``AND`` or ``OR`` (any case)."""
    return token.lower() in _LOGICAL_KEYS


def supported_operators_text() -> str:
    """Comma-separated comparison operators, in catalog order."""
    return ", ".join(COMPARISON_OPERATORS)


def describe(operator: str) -> str:
    """Human-readable description of a comparison operator.

    Unknown operators are returned unchanged.

    Examples:
        >>> describe("gt")
        'gt (greater than)'
        >>> describe("EQUALS")
        'equals (exact match)'
        >>> describe("between")
        'between'
    """
    return OPERATOR_DESCRIPTIONS.get(operator.lower(), operator)

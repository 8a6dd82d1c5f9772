"""Rule model — Clause, Rule, and Expression.

Unlike the frozen config models, these are mutable: an Expression is
the single document that editing operations change in place.

Positional invariant at both levels:
  operators[i] sits between items[i] and items[i + 1], so
  len(operators) == max(len(items) - 1, 0).

The parser guarantees the invariant; the models do not re-check it on
mutation (use ``is_well_formed()``).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Clause(BaseModel):
    """A single property/operator/value comparison."""

    model_config = {"validate_assignment": True}

    property: str = ""
    operator: str = ""
    value: str = ""


class Rule(BaseModel):
    """Clauses joined by clause-level AND/OR operators."""

    model_config = {"validate_assignment": True}

    clauses: list[Clause] = Field(default_factory=list)
    clause_operators: list[str] = Field(default_factory=list)

    def is_well_formed(self) -> bool:
        """Non-empty, with exactly one operator between each pair of clauses."""
        return bool(self.clauses) and len(self.clause_operators) == len(self.clauses) - 1


class Expression(BaseModel):
    """Rules joined by rule-level AND/OR operators.

    An Expression is owned by exactly one caller. It carries no locking:
    all mutation of one instance must happen on a single thread of
    control (for example, one UI event loop or one CLI invocation).
    """

    model_config = {"validate_assignment": True}

    rules: list[Rule] = Field(default_factory=list)
    rule_operators: list[str] = Field(default_factory=list)

    @property
    def clauses(self) -> list[Clause]:
        """All clauses of all rules, flattened in document order."""
        return [clause for rule in self.rules for clause in rule.clauses]

    def is_well_formed(self) -> bool:
        """Check the positional invariant at both levels."""
        if len(self.rule_operators) != max(len(self.rules) - 1, 0):
            return False
        return all(rule.is_well_formed() for rule in self.rules)

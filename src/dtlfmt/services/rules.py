"""RuleService — parse, format, describe, and edit DTL text.

Pipeline for every text operation: PARSE → (EDIT) → FORMAT → RESPOND.
Core failures (:class:`~dtlfmt.domain.errors.DtlError`) become failed
ServiceResults; nothing is raised to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from dtlfmt.config.settings import DtlSettings
from dtlfmt.domain import editing
from dtlfmt.domain.errors import DtlError, EditError
from dtlfmt.domain.formatter import format_expression
from dtlfmt.domain.model import Expression
from dtlfmt.domain.operators import (
    COMPARISON_OPERATORS,
    LOGICAL_OPERATORS,
    OPERATOR_DESCRIPTIONS,
    describe,
)
from dtlfmt.domain.parser import DtlParser
from dtlfmt.services.result import ServiceResult

logger = logging.getLogger(__name__)

EditAction = Callable[..., Any]


def _failure(op: str, exc: DtlError) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc.message)
    return ServiceResult.failure(op, exc)


def _skipped_warnings(parser: DtlParser) -> list[str]:
    return [
        f"Skipped token '{token}' at position {position}"
        for position, token in parser.skipped
    ]


def _expression_payload(expression: Expression) -> dict[str, Any]:
    return {
        "rule_count": len(expression.rules),
        "clause_count": len(expression.clauses),
        "dtl": format_expression(expression),
        "expression": expression.model_dump(),
    }


class RuleService:
    """Service facade over the DTL core.

    Holds no document state: every call parses its own text, so
    concurrent calls never share an Expression.
    """

    def __init__(self, settings: DtlSettings | None = None) -> None:
        self._settings = settings or DtlSettings()

    @property
    def strict(self) -> bool:
        return self._settings.strict_parsing

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str | None) -> ServiceResult:
        """Parse *text* and report its structure and canonical form."""
        op = "parse"
        parser = DtlParser(strict=self.strict)
        try:
            expression = parser.parse(text)
        except DtlError as exc:
            return _failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data=_expression_payload(expression),
            warnings=_skipped_warnings(parser),
        )

    def format(self, text: str | None) -> ServiceResult:
        """Re-render *text* in canonical DTL form."""
        op = "format"
        parser = DtlParser(strict=self.strict)
        try:
            expression = parser.parse(text)
        except DtlError as exc:
            return _failure(op, exc)

        dtl = format_expression(expression)
        return ServiceResult(
            ok=True,
            op=op,
            data={"dtl": dtl, "changed": dtl != (text or "").strip()},
            warnings=_skipped_warnings(parser),
        )

    def describe(self, operator: str) -> ServiceResult:
        """Look up the human-readable description of *operator*."""
        return ServiceResult(
            ok=True,
            op="describe",
            data={
                "operator": operator,
                "description": describe(operator),
                "known": operator.lower() in OPERATOR_DESCRIPTIONS,
            },
        )

    def operators(self) -> ServiceResult:
        """List the comparison and logical operator catalogs."""
        return ServiceResult(
            ok=True,
            op="operators",
            data={
                "comparison": [
                    {"operator": op, "description": describe(op)} for op in COMPARISON_OPERATORS
                ],
                "logical": list(LOGICAL_OPERATORS),
            },
        )

    def scratch(self) -> ServiceResult:
        """Create a new expression from the configured scratch clause."""
        expression = editing.new_expression(self._settings.editor.scratch_clause.to_clause())
        return ServiceResult(ok=True, op="scratch", data=_expression_payload(expression))

    def edit(self, text: str | None, action: str, **params: Any) -> ServiceResult:
        """Parse *text*, apply one editing *action*, and re-render.

        Actions: ``add_rule``, ``add_clause``, ``remove_rule``,
        ``remove_clause``, ``set_field``, ``set_operator``.
        """
        op = "edit"
        handler = self._edit_actions().get(action)
        if handler is None:
            return _failure(op, EditError(f"Unknown edit action '{action}'", action=action))

        try:
            expression = DtlParser(strict=self.strict).parse(text)
            handler(expression, **params)
        except DtlError as exc:
            return _failure(op, exc)

        warnings: list[str] = []
        if not expression.rules:
            warnings.append("Expression has no rules left")
        logger.debug("Applied edit %s with %s", action, params)
        return ServiceResult(
            ok=True,
            op=op,
            data={"action": action, **_expression_payload(expression)},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Edit dispatch
    # ------------------------------------------------------------------

    def _edit_actions(self) -> dict[str, EditAction]:
        editor = self._settings.editor

        def add_rule(expression: Expression, *, operator: str | None = None) -> None:
            editing.add_rule(
                expression,
                editor.new_rule_clause.to_clause(),
                operator or editor.default_rule_operator,
            )

        def add_clause(
            expression: Expression, *, rule: int, operator: str | None = None
        ) -> None:
            editing.add_clause(
                expression,
                rule,
                editor.new_clause.to_clause(),
                operator or editor.default_clause_operator,
            )

        def remove_rule(expression: Expression, *, rule: int) -> None:
            editing.remove_rule(expression, rule)

        def remove_clause(expression: Expression, *, rule: int, clause: int) -> None:
            editing.remove_clause(expression, rule, clause)

        def set_field(
            expression: Expression, *, rule: int, clause: int, field: str, value: str
        ) -> None:
            editing.set_clause_field(expression, rule, clause, field, value)

        def set_operator(
            expression: Expression, *, slot: int, value: str, rule: int | None = None
        ) -> None:
            editing.set_operator(expression, slot, value, rule_index=rule)

        return {
            "add_rule": add_rule,
            "add_clause": add_clause,
            "remove_rule": remove_rule,
            "remove_clause": remove_clause,
            "set_field": set_field,
            "set_operator": set_operator,
        }

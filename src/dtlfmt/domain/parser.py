"""DTL parser — pipe-delimited text into an Expression.

Grammar:
  expression    := "Rule" clause-triple (clause-op clause-triple)*
                   ( rule-op "Rule" clause-triple (clause-op clause-triple)* )*
  clause-triple := property "|" operator "|" value

Rule-level and clause-level operators are the same tokens (AND / OR).
The parser tells them apart with one token of lookahead: an operator
immediately followed by ``Rule`` joins two rules, any other operator
joins two clauses of the current rule. See :func:`is_rule_level_operator`.

The walk is a flat state machine over a :class:`TokenCursor`; it holds
the expression being built and the rule currently receiving clauses.

INVARIANT: a failure aborts the whole parse. No partial Expression is
ever returned.
"""

from __future__ import annotations

import logging

from dtlfmt.domain.errors import EmptyInputError, MalformedRuleError, UnexpectedTokenError
from dtlfmt.domain.model import Clause, Expression, Rule
from dtlfmt.domain.operators import (
    COMPARISON_OPERATORS,
    is_comparison_operator,
    is_logical_operator,
    is_rule_keyword,
    supported_operators_text,
)

logger = logging.getLogger(__name__)

DELIMITER = "|"
CLAUSE_WIDTH = 3


def tokenize(text: str) -> list[str]:
    """Split on ``|`` and strip whitespace around every token.

    There is no escape for ``|``; a literal pipe cannot appear in a
    property, operator, or value.

    Examples:
        >>> tokenize("Rule | country |in| US")
        ['Rule', 'country', 'in', 'US']
        >>> tokenize("a||b")
        ['a', '', 'b']
    """
    return [token.strip() for token in text.split(DELIMITER)]


class TokenCursor:
    """Forward-only cursor over a token list with lookahead."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self.position

    def at_end(self) -> bool:
        return self.position >= len(self._tokens)

    def peek(self, offset: int = 0) -> str | None:
        """Token at ``position + offset``, or None past the end."""
        index = self.position + offset
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def advance(self, count: int = 1) -> None:
        self.position += count

    def take(self, count: int) -> list[str]:
        """Consume and return the next *count* tokens."""
        taken = self._tokens[self.position : self.position + count]
        self.position += len(taken)
        return taken


def is_rule_level_operator(cursor: TokenCursor) -> bool:
    """Decide whether the logical operator under the cursor joins rules.

    The cursor must sit on an AND/OR token. The operator is rule-level
    exactly when the next token is the ``Rule`` keyword; otherwise it
    joins two clauses within the current rule.

    Examples:
        >>> is_rule_level_operator(TokenCursor(["OR", "Rule", "a", "in", "b"]))
        True
        >>> is_rule_level_operator(TokenCursor(["AND", "a", "in", "b"]))
        False
        >>> is_rule_level_operator(TokenCursor(["OR"]))
        False
    """
    following = cursor.peek(1)
    return following is not None and is_rule_keyword(following)


class DtlParser:
    """Parser for DTL strings. Reusable, but not safe to share across threads.

    Args:
        strict: Reject tokens outside the grammar instead of skipping
            them. Also rejects operators with nothing to join and a
            ``Rule`` keyword that follows a rule without an operator.

    After :meth:`parse` returns, :attr:`skipped` lists the
    ``(position, token)`` pairs ignored in lenient mode.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self.skipped: list[tuple[int, str]] = []
        self._cursor = TokenCursor([])
        self._expression = Expression()
        self._current = Rule()

    def parse(self, text: str | None) -> Expression:
        if text is None or not text.strip():
            raise EmptyInputError()

        tokens = tokenize(text)
        logger.debug("Tokenized DTL input into %d tokens", len(tokens))

        self.skipped = []
        self._cursor = TokenCursor(tokens)
        self._expression = Expression()
        self._current = Rule()

        while not self._cursor.at_end():
            token = self._cursor.peek()
            assert token is not None
            if is_rule_keyword(token):
                self._on_rule_keyword()
            elif is_logical_operator(token):
                self._on_logical_operator(token)
            else:
                self._on_unrecognized(token)

        self._close_rule()
        expression = self._expression
        logger.debug(
            "Parsed %d rule(s), %d clause(s), %d skipped token(s)",
            len(expression.rules),
            len(expression.clauses),
            len(self.skipped),
        )
        return expression

    # ------------------------------------------------------------------
    # Token handlers
    # ------------------------------------------------------------------

    def _on_rule_keyword(self) -> None:
        position = self._cursor.position
        self._cursor.advance()
        self._begin_rule(None, position)
        self._parse_clause()

    def _on_logical_operator(self, token: str) -> None:
        position = self._cursor.position
        operator = token.upper()
        if is_rule_level_operator(self._cursor):
            # Step over both the operator and the Rule keyword.
            self._cursor.advance(2)
            self._begin_rule(operator, position)
        else:
            self._cursor.advance()
            if self._current.clauses:
                self._current.clause_operators.append(operator)
            elif self.strict:
                raise UnexpectedTokenError(
                    f"Clause operator '{token}' at position {position} has no preceding clause",
                    position=position,
                    token=token,
                )
            else:
                logger.debug("Dropping clause operator %r at position %d", token, position)
                self.skipped.append((position, token))
        self._parse_clause()

    def _on_unrecognized(self, token: str) -> None:
        position = self._cursor.position
        if self.strict:
            raise UnexpectedTokenError(
                f"Unexpected token '{token}' at position {position}",
                position=position,
                token=token,
            )
        logger.debug("Skipping unrecognized token %r at position %d", token, position)
        self.skipped.append((position, token))
        self._cursor.advance()

    # ------------------------------------------------------------------
    # Rule and clause construction
    # ------------------------------------------------------------------

    def _close_rule(self) -> None:
        """Retain the in-progress rule if it has clauses, then reset it."""
        if self._current.clauses:
            self._expression.rules.append(self._current)
        self._current = Rule()

    def _begin_rule(self, operator: str | None, position: int) -> None:
        """Close the current rule and open a new one joined by *operator*.

        An operator slot is recorded only when a retained rule precedes
        the new one, which keeps ``rule_operators`` one shorter than
        ``rules``. A bare ``Rule`` after a rule gets an empty slot.
        """
        self._close_rule()
        if self._expression.rules:
            if operator is None:
                if self.strict:
                    raise UnexpectedTokenError(
                        f"Rule at position {position} is not joined to the previous rule "
                        "by AND or OR",
                        position=position,
                        token="Rule",
                    )
                operator = ""
            self._expression.rule_operators.append(operator)
        elif operator is not None:
            if self.strict:
                raise UnexpectedTokenError(
                    f"Rule operator '{operator}' at position {position} has no preceding rule",
                    position=position,
                    token=operator,
                )
            logger.debug("Dropping rule operator %r at position %d", operator, position)
            self.skipped.append((position, operator))

    def _parse_clause(self) -> None:
        """Consume one property/operator/value triple into the current rule."""
        start = self._cursor.position
        if self._cursor.remaining < CLAUSE_WIDTH:
            raise MalformedRuleError(
                f"Incomplete clause at position {start}: expected property, operator, and value",
                position=start,
            )

        prop, operator, value = self._cursor.take(CLAUSE_WIDTH)
        if not is_comparison_operator(operator):
            raise MalformedRuleError(
                f"Unsupported operator '{operator}'. "
                f"Supported operators: {supported_operators_text()}",
                position=start + 1,
                operator=operator,
                supported=list(COMPARISON_OPERATORS),
            )

        self._current.clauses.append(Clause(property=prop, operator=operator, value=value))


def parse(text: str | None, *, strict: bool = False) -> Expression:
    """Parse DTL text into a new Expression.

    Raises:
        EmptyInputError: *text* is None, empty, or whitespace only.
        MalformedRuleError: A clause is truncated or uses an unsupported
            operator (or, with *strict*, a token is outside the grammar).
    """
    return DtlParser(strict=strict).parse(text)

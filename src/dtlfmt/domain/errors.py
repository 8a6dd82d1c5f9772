"""Error taxonomy for the DTL core.

Every error carries a stable ``code`` and a ``detail`` dict so the
service layer can forward it as a ServiceError without inspecting
the exception type.
"""

from __future__ import annotations

from typing import Any


class DtlError(Exception):
    """Base class for all DTL parse and edit failures."""

    code = "DTL_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = {k: v for k, v in detail.items() if v is not None}


class EmptyInputError(DtlError):
    """The text to parse was None, empty, or whitespace only."""

    code = "EMPTY_INPUT"

    def __init__(self, message: str = "Input cannot be null or empty") -> None:
        super().__init__(message)


class MalformedRuleError(DtlError):
    """A clause could not be completed or used an unsupported operator."""

    code = "MALFORMED_RULE"

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        operator: str | None = None,
        supported: list[str] | None = None,
    ) -> None:
        super().__init__(message, position=position, operator=operator, supported=supported)
        self.position = position
        self.operator = operator


class UnexpectedTokenError(MalformedRuleError):
    """Strict mode: a token outside the grammar was encountered."""

    code = "UNEXPECTED_TOKEN"

    def __init__(self, message: str, *, position: int, token: str) -> None:
        super().__init__(message, position=position)
        self.token = token
        self.detail["token"] = token


class EditError(DtlError):
    """An editing helper was given an index or value it cannot apply."""

    code = "EDIT_FAILED"

"""Return types shared by every RuleService operation.

Services never raise core errors at their callers. A
:class:`~dtlfmt.domain.errors.DtlError` is folded into a failed
:class:`ServiceResult` whose ``error`` carries the same code and detail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from dtlfmt.domain.errors import DtlError


class ServiceError(BaseModel):
    """Machine-readable failure: a stable ``code`` plus context in ``detail``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DtlError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: False exactly when ``error`` is set.
        op: Operation name, e.g. ``"parse"`` or ``"edit"``.
        data: Payload for the renderers (``dtl``, ``expression``, ...).
        warnings: Recoverable problems, such as skipped tokens.
        error: Populated on failure.
        meta: Free-form extras; unused by the renderers.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: DtlError) -> ServiceResult:
        """Wrap a core exception as a failed result for *op*."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))

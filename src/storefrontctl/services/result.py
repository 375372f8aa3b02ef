"""ServiceResult and ServiceError, the contract between services and the CLI.

INVARIANT: Every service-layer method returns ServiceResult.  Errors travel
inside the result; services do not raise for bad input or failed I/O.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorCode:
    """ServiceError codes."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    UNKNOWN_TEMPLATE = "UNKNOWN_TEMPLATE"
    WRITE_FAILED = "WRITE_FAILED"
    RENDER_FAILED = "RENDER_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"migrate_apply"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (paths, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

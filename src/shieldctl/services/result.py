"""Envelope returned by every service operation.

The CLI renders these; embedding callers can read ``ok``/``data``/``error``
directly or dump the model to JSON.  Services never raise for expected
failures (bad wire JSON, invalid commands); they return ``ok=False``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is either an operational code (``DECODE_ERROR``,
    ``READ_ERROR``) or the violated validation rule (``EMPTY_SENDER``), in
    which case ``detail["kind"]`` holds the failure kind (``empty_signer``).
    """

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation.

    Attributes:
        ok: False only when the operation itself failed.
        op: Operation name, e.g. ``"validate"``.
        data: Operation payload; present on some failures too.
        warnings: Non-fatal notes (invalid-but-built commands, plugin errors).
        error: Set exactly when ``ok`` is False.
        meta: Free-form extras for embedding callers.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Failed result; keyword extras land in ``error.detail``."""
        return cls(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail),
        )

"""What every ``KindService`` operation returns.

A lookup that finds nothing is reported as ``ok=False`` with one of the
codes below; services never raise for it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

NO_MATCH = "NO_MATCH"
INVALID_INPUT = "INVALID_INPUT"


class ServiceError(BaseModel):
    """Why an operation produced no answer."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation, named by ``op`` (``"resolve"``, ``"common"``...).

    On success ``data`` holds the op-specific payload and ``warnings``
    any fallbacks worth mentioning; on failure ``error`` is set.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """``ok=False`` result; keyword arguments become ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

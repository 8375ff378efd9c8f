"""ServiceResult and ServiceError — what every endpoint operation returns.

INVARIANT: EndpointService methods never raise for rejected input; they
return a ServiceResult whose ``error.code`` is the EndpointError code
(``MALFORMED_IPN``, ``MALFORMED_WIRE_SHAPE``, ...).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

Operation = Literal["parse", "encode", "decode", "roundtrip"]


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one endpoint operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Which operation ran.
        data: Endpoint fields on success (``uri``, ``data``, ``node`` ...).
        warnings: Non-fatal notes, e.g. an unrecognized decoded scheme code.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: Operation
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: Operation, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail)
        )

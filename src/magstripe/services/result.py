"""ServiceResult and ServiceError — the service return contract.

INVARIANT: Service methods return ServiceResult and do not raise for
malformed card data. The CLI consumes this type for output and exit codes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"decode_service_code"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues, such as undecodable positions.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

"""ServiceResult and ServiceError — the service return contract.

INVARIANT: All service-layer operations return ServiceResult.
Hosts consume this type instead of catching exceptions.
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
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"lint"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result carrying a single ServiceError."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    @property
    def violations(self) -> list[dict[str, Any]]:
        """Violation payloads of a lint result; empty for anything else."""
        return list(self.data.get("violations", []))

    def count_by_rule(self) -> dict[str, int]:
        """Number of violations per rule name, in first-reported order."""
        counts: dict[str, int] = {}
        for violation in self.violations:
            counts[violation["rule"]] = counts.get(violation["rule"], 0) + 1
        return counts

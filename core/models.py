# PATH: core/models.py
"""
Core data models for the RPC client.

RESULT CONTRACT
===============
- CallAttempt: outcome of one endpoint for one logical call.
- ExecutionMetadata: which strategy ran, when, and every attempt made.
- ExecutionResult: uniform success/failure returned by execute().

success is True iff at least one CallAttempt succeeded.
On success, data is the endpoint value (fallback) or the ordered list
of CallAttempts (parallel). On total failure, errors holds every attempt.
All of these are created fresh per execute() call.
===============
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from core.constants import AttemptStatus, StrategyType
from core.time import ms_to_iso

T = TypeVar("T")


@dataclass
class CallAttempt:
    """Recorded outcome of one Transport invocation."""
    url: str
    status: AttemptStatus
    response_time_ms: int
    data: Any = None
    error: Optional[str] = None
    fingerprint: Optional[str] = None

    @classmethod
    def succeeded(
        cls,
        url: str,
        response_time_ms: int,
        data: Any,
        fingerprint: Optional[str] = None,
    ) -> "CallAttempt":
        return cls(
            url=url,
            status=AttemptStatus.SUCCESS,
            response_time_ms=response_time_ms,
            data=data,
            fingerprint=fingerprint,
        )

    @classmethod
    def failed(cls, url: str, response_time_ms: int, error: str) -> "CallAttempt":
        return cls(
            url=url,
            status=AttemptStatus.ERROR,
            response_time_ms=response_time_ms,
            error=error,
        )

    @property
    def is_success(self) -> bool:
        return self.status == AttemptStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "url": self.url,
            "status": self.status.value,
            "response_time_ms": self.response_time_ms,
        }
        if self.is_success:
            result["data"] = self.data
            if self.fingerprint is not None:
                result["fingerprint"] = self.fingerprint
        else:
            result["error"] = self.error
        return result


@dataclass
class ExecutionMetadata:
    """Execution details attached to every ExecutionResult."""
    strategy: StrategyType
    timestamp_ms: int
    responses: list[CallAttempt] = field(default_factory=list)
    has_inconsistencies: bool = False

    def successful(self) -> list[CallAttempt]:
        """Successful attempts in endpoint order."""
        return [r for r in self.responses if r.is_success]

    def failed(self) -> list[CallAttempt]:
        """Failed attempts in endpoint order."""
        return [r for r in self.responses if not r.is_success]

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "timestamp_ms": self.timestamp_ms,
            "timestamp": ms_to_iso(self.timestamp_ms),
            "responses": [r.to_dict() for r in self.responses],
            "has_inconsistencies": self.has_inconsistencies,
        }


@dataclass
class ExecutionResult(Generic[T]):
    """
    Uniform result of one execute() call.

    Callers must check success; execute() never raises for endpoint
    failures.
    """
    success: bool
    data: Optional[T] = None
    errors: Optional[list[CallAttempt]] = None
    metadata: Optional[ExecutionMetadata] = None

    def successful_responses(self) -> list[CallAttempt]:
        """Successful attempts recorded in metadata (empty if none)."""
        if self.metadata is None:
            return []
        return self.metadata.successful()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.success:
            if isinstance(self.data, list) and all(isinstance(d, CallAttempt) for d in self.data):
                result["data"] = [d.to_dict() for d in self.data]
            else:
                result["data"] = self.data
        if self.errors is not None:
            result["errors"] = [e.to_dict() for e in self.errors]
        if self.metadata is not None:
            result["metadata"] = self.metadata.to_dict()
        return result

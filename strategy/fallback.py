"""
strategy/fallback.py - Sequential fallback strategy.

Tries endpoints in configured priority order and stops at the first
success. A lower-priority endpoint is never contacted once a
higher-priority one has answered.
"""

from core.constants import StrategyType
from core.logging import get_logger
from core.models import ExecutionMetadata, ExecutionResult
from core.time import now_ms
from strategy.base import RequestStrategy

logger = get_logger(__name__)


class FallbackStrategy(RequestStrategy):
    """
    Fallback across endpoints.

    Metadata keeps every attempt made, including failures that preceded
    the success. has_inconsistencies is always False.
    """

    name = StrategyType.FALLBACK

    async def execute(self, method: str, params: list | None = None) -> ExecutionResult:
        metadata = ExecutionMetadata(strategy=self.name, timestamp_ms=now_ms())

        for transport in self._transports:
            attempt, value = await self._attempt(transport, method, params)
            metadata.responses.append(attempt)

            if attempt.is_success:
                return ExecutionResult(success=True, data=value, metadata=metadata)

            logger.debug(
                f"Endpoint failed, falling back: {attempt.error}",
                extra={"context": {
                    "url": attempt.url,
                    "method": method,
                    "response_time_ms": attempt.response_time_ms,
                }},
            )

        logger.warning(
            f"All {len(self._transports)} RPC endpoints failed for {method}",
            extra={"context": {
                "method": method,
                "endpoints_tried": len(metadata.responses),
                "last_error": metadata.responses[-1].error,
            }},
        )
        return ExecutionResult(
            success=False,
            errors=list(metadata.responses),
            metadata=metadata,
        )

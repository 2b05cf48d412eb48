"""
strategy/parallel.py - Concurrent fan-out strategy with comparison.

Sends the same call to every endpoint at once and waits for ALL of
them to settle. Nothing is cancelled early: cross-provider comparison
needs every response.

Successful values are fingerprinted after the join and compared against
the first successful attempt in endpoint-configuration order.
"""

import asyncio

from core.constants import StrategyType
from core.fingerprint import fingerprint
from core.logging import get_logger
from core.models import CallAttempt, ExecutionMetadata, ExecutionResult
from core.time import now_ms
from strategy.base import RequestStrategy

logger = get_logger(__name__)

# Recorded when a successful value cannot be hashed
UNHASHABLE_FINGERPRINT = ""


def safe_fingerprint(attempt: CallAttempt, method: str) -> str:
    """Fingerprint a successful attempt; hashing failures never escape."""
    try:
        return fingerprint(attempt.data)
    except Exception as e:
        logger.warning(
            f"Could not fingerprint response from {attempt.url}: {type(e).__name__}",
            exc_info=True,
            extra={"context": {"url": attempt.url, "method": method}},
        )
        return UNHASHABLE_FINGERPRINT


def detect_inconsistencies(responses: list[CallAttempt]) -> bool:
    """
    Compare fingerprints of successful attempts.

    Returns:
        True iff there are at least 2 successes and any fingerprint
        differs from the first successful one (list order).
    """
    successful = [r for r in responses if r.is_success]
    if len(successful) < 2:
        return False

    reference = successful[0].fingerprint
    return any(r.fingerprint != reference for r in successful[1:])


class ParallelStrategy(RequestStrategy):
    """
    Parallel execution across all endpoints.

    On success, data is the full ordered list of CallAttempts; the
    caller reconciles. On total failure the same list is in errors.
    """

    name = StrategyType.PARALLEL

    async def execute(self, method: str, params: list | None = None) -> ExecutionResult:
        timestamp = now_ms()

        # Each task writes only its own slot; gather keeps endpoint order
        settled = await asyncio.gather(
            *(self._attempt(transport, method, params) for transport in self._transports)
        )
        responses = [attempt for attempt, _ in settled]

        for attempt in responses:
            if attempt.is_success:
                attempt.fingerprint = safe_fingerprint(attempt, method)

        has_inconsistencies = detect_inconsistencies(responses)
        metadata = ExecutionMetadata(
            strategy=self.name,
            timestamp_ms=timestamp,
            responses=responses,
            has_inconsistencies=has_inconsistencies,
        )

        if has_inconsistencies:
            logger.warning(
                f"Inconsistent responses for {method}",
                extra={"context": {
                    "method": method,
                    "fingerprints": [[r.url, r.fingerprint] for r in metadata.successful()],
                }},
            )

        if any(r.is_success for r in responses):
            return ExecutionResult(success=True, data=list(responses), metadata=metadata)

        logger.warning(
            f"All {len(responses)} RPC endpoints failed for {method}",
            extra={"context": {
                "method": method,
                "errors": [r.error for r in responses],
            }},
        )
        return ExecutionResult(success=False, errors=list(responses), metadata=metadata)

"""
strategy/base.py - Request strategy interface.

A strategy owns a fixed, non-empty list of transports and turns one
logical call into one ExecutionResult.
"""

from abc import ABC, abstractmethod
from typing import Any

from chains.transport import JsonRpcTransport
from core.constants import ErrorCode, StrategyType
from core.exceptions import ConfigurationError, RpcCallError
from core.logging import get_logger
from core.models import CallAttempt, ExecutionResult
from core.time import elapsed_ms, monotonic_ms

logger = get_logger(__name__)


class RequestStrategy(ABC):
    """Base class for execution strategies."""

    name: StrategyType

    def __init__(self, transports: list[JsonRpcTransport]):
        if not transports:
            raise ConfigurationError(
                "At least one RPC transport must be provided",
                code=ErrorCode.CONFIG_NO_ENDPOINTS,
                details={"strategy": self.name.value},
            )
        self._transports = tuple(transports)

    @property
    def transports(self) -> tuple[JsonRpcTransport, ...]:
        return self._transports

    def get_name(self) -> str:
        """Strategy name for logging/debugging."""
        return self.name.value

    @abstractmethod
    async def execute(self, method: str, params: list | None = None) -> ExecutionResult:
        """
        Execute an RPC request using this strategy.

        Never raises for endpoint failures; check result.success.
        """

    async def _attempt(
        self,
        transport: JsonRpcTransport,
        method: str,
        params: list | None,
    ) -> tuple[CallAttempt, Any]:
        """
        Call one transport and record the outcome.

        Returns:
            (attempt, value) - value is None for failed attempts
        """
        start = monotonic_ms()
        try:
            value = await transport.call(method, params)
        except RpcCallError as e:
            return CallAttempt.failed(transport.url, elapsed_ms(start), e.message), None
        except Exception as e:
            logger.warning(
                f"Unexpected error calling {transport.url}: {e}",
                exc_info=True,
                extra={"context": {"url": transport.url, "method": method}},
            )
            return CallAttempt.failed(transport.url, elapsed_ms(start), str(e) or type(e).__name__), None
        return CallAttempt.succeeded(transport.url, elapsed_ms(start), value), value

    async def close(self) -> None:
        """Close all transports."""
        for transport in self._transports:
            await transport.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoints={len(self._transports)})"

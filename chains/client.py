"""
chains/client.py - Network client facade.

Holds one active strategy plus the configured URL list. Network-specific
wrappers call execute() with a fixed method name and parameters.
"""

from pathlib import Path
from typing import Any

import httpx

from core.constants import StrategyType
from core.logging import get_logger, log_execution
from core.models import ExecutionResult
from strategy.base import RequestStrategy
from strategy.config import StrategyConfig, load_network_config
from strategy.factory import create_strategy

logger = get_logger(__name__)


class NetworkClient:
    """
    Multi-endpoint JSON-RPC client.

    Usage:
        async with NetworkClient(StrategyConfig("parallel", urls)) as client:
            result = await client.execute("eth_chainId")
            if result.success:
                ...

    update_strategy() swaps in a freshly built strategy (and fresh
    transports) for the same URLs. Replaced strategies are closed by the
    first execute() that finishes with no other call in flight, or by
    close().
    """

    def __init__(
        self,
        config: StrategyConfig,
        client: httpx.AsyncClient | None = None,
    ):
        # Fails fast with ConfigurationError before any I/O
        self._strategy = create_strategy(config, client=client)
        self._rpc_urls = list(config.rpc_urls)
        self._timeout_seconds = config.timeout_seconds
        self._http_client = client
        self._retired: list[RequestStrategy] = []
        self._in_flight = 0

    @classmethod
    def from_network(
        cls,
        network: str,
        config_path: Path | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> "NetworkClient":
        """Build a client from a networks.yaml entry."""
        return cls(load_network_config(network, config_path), client=client)

    async def execute(self, method: str, params: list | None = None) -> ExecutionResult[Any]:
        """
        Execute any RPC method with the configured strategy.

        Args:
            method: RPC method name (e.g., "eth_blockNumber")
            params: Method parameters (default: [])

        Returns:
            ExecutionResult; never raises for endpoint failures
        """
        self._in_flight += 1
        try:
            result = await self._strategy.execute(method, params if params is not None else [])
        finally:
            self._in_flight -= 1
        if self._retired and self._in_flight == 0:
            await self._close_retired()
        log_execution(logger, method, result)
        return result

    async def _close_retired(self) -> None:
        """Close replaced strategies; none of them can have calls in flight."""
        retired, self._retired = self._retired, []
        for strategy in retired:
            await strategy.close()

    def get_strategy(self) -> RequestStrategy:
        """Get the underlying strategy instance."""
        return self._strategy

    def get_strategy_name(self) -> str:
        """Get the strategy name (fallback or parallel)."""
        return self._strategy.get_name()

    def get_rpc_urls(self) -> list[str]:
        """Get the configured RPC URLs."""
        return list(self._rpc_urls)

    def update_strategy(self, strategy_type: StrategyType | str) -> None:
        """
        Rebuild the strategy with the same URLs.

        Raises:
            ConfigurationError: Unknown strategy type (current strategy kept)
        """
        new_strategy = create_strategy(
            StrategyConfig(
                type=strategy_type,
                rpc_urls=self._rpc_urls,
                timeout_seconds=self._timeout_seconds,
            ),
            client=self._http_client,
        )
        old_name = self._strategy.get_name()
        self._retired.append(self._strategy)
        self._strategy = new_strategy
        logger.info(
            f"Strategy updated: {old_name} -> {new_strategy.get_name()}",
            extra={"context": {"endpoints": len(self._rpc_urls)}},
        )

    async def close(self) -> None:
        """Close transports of the current and all replaced strategies."""
        await self._close_retired()
        await self._strategy.close()

    async def __aenter__(self) -> "NetworkClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"NetworkClient(strategy={self.get_strategy_name()!r}, endpoints={len(self._rpc_urls)})"

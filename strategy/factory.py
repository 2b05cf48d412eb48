"""
strategy/factory.py - Strategy construction from config.
"""

import httpx

from chains.transport import JsonRpcTransport
from core.constants import ErrorCode, StrategyType
from core.exceptions import ConfigurationError
from strategy.base import RequestStrategy
from strategy.config import StrategyConfig
from strategy.fallback import FallbackStrategy
from strategy.parallel import ParallelStrategy

STRATEGIES: dict[StrategyType, type[RequestStrategy]] = {
    StrategyType.FALLBACK: FallbackStrategy,
    StrategyType.PARALLEL: ParallelStrategy,
}


def parse_strategy_type(value: StrategyType | str) -> StrategyType:
    """Map a strategy tag to StrategyType; unknown tags raise ConfigurationError."""
    try:
        return StrategyType(value)
    except ValueError:
        raise ConfigurationError(
            f"Unknown strategy type: {value}",
            code=ErrorCode.CONFIG_UNKNOWN_STRATEGY,
            details={"type": str(value), "supported": [s.value for s in StrategyType]},
        ) from None


def create_strategy(
    config: StrategyConfig,
    client: httpx.AsyncClient | None = None,
) -> RequestStrategy:
    """
    Create a request strategy with one transport per URL.

    URL order is preserved and duplicates are kept.

    Args:
        config: Strategy type and RPC URLs
        client: Optional shared HTTP client for all transports

    Raises:
        ConfigurationError: Empty URL list or unknown strategy type
    """
    if not config.rpc_urls:
        raise ConfigurationError(
            "At least one RPC URL must be provided",
            code=ErrorCode.CONFIG_NO_ENDPOINTS,
        )

    strategy_type = parse_strategy_type(config.type)

    transports = [
        JsonRpcTransport(url, timeout_seconds=config.timeout_seconds, client=client)
        for url in config.rpc_urls
    ]
    return STRATEGIES[strategy_type](transports)

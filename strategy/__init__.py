"""Execution strategies: how several endpoints answer one call."""

from strategy.base import RequestStrategy
from strategy.config import StrategyConfig, load_network_config
from strategy.factory import create_strategy, parse_strategy_type
from strategy.fallback import FallbackStrategy
from strategy.parallel import ParallelStrategy, detect_inconsistencies

__all__ = [
    "RequestStrategy",
    "StrategyConfig",
    "load_network_config",
    "create_strategy",
    "parse_strategy_type",
    "FallbackStrategy",
    "ParallelStrategy",
    "detect_inconsistencies",
]

"""
strategy/config.py - Strategy configuration.

Which strategy to run and against which endpoints, loaded from
config/networks.yaml with env-var placeholders in URLs.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from config import get_network_config
from core.constants import DEFAULT_TIMEOUT_SECONDS, ErrorCode, StrategyType
from core.exceptions import ConfigurationError
from core.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass
class StrategyConfig:
    """Strategy type plus the ordered endpoint list."""
    type: StrategyType | str
    rpc_urls: list[str] = field(default_factory=list)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def resolve_url(url: str) -> str | None:
    """
    Substitute ${VAR} placeholders from the environment.

    Returns:
        Resolved URL, or None if any placeholder is unset or empty
    """
    missing = []

    def _sub(match: re.Match) -> str:
        value = os.getenv(match.group(1), "")
        if not value:
            missing.append(match.group(1))
        return value

    resolved = PLACEHOLDER_PATTERN.sub(_sub, url)
    if missing:
        return None
    return resolved


def resolve_urls(urls: list[str]) -> list[str]:
    """Resolve placeholders, skipping URLs that cannot be resolved."""
    resolved = []
    for url in urls:
        resolved_url = resolve_url(url)
        if resolved_url is None:
            logger.warning(
                "Skipping RPC URL with unresolved placeholder",
                extra={"context": {"url": url}},
            )
            continue
        resolved.append(resolved_url)
    return resolved


def strategy_config_from_dict(data: dict[str, Any], network: str = "") -> StrategyConfig:
    """
    Build a StrategyConfig from a parsed network entry.

    Raises:
        ConfigurationError: If the entry is malformed or has no usable URLs
    """
    rpc_urls = data.get("rpc_urls") or []
    if not isinstance(rpc_urls, list) or not all(isinstance(u, str) for u in rpc_urls):
        raise ConfigurationError(
            "rpc_urls must be a list of strings",
            details={"network": network},
        )

    urls = resolve_urls(rpc_urls)
    if not urls:
        raise ConfigurationError(
            f"No usable RPC URLs configured for {network or 'network'}",
            code=ErrorCode.CONFIG_NO_ENDPOINTS,
            details={"network": network, "configured": len(rpc_urls)},
        )

    try:
        timeout_seconds = float(data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid timeout_seconds: {data.get('timeout_seconds')!r}",
            details={"network": network},
        ) from e

    return StrategyConfig(
        type=data.get("strategy", StrategyType.FALLBACK.value),
        rpc_urls=urls,
        timeout_seconds=timeout_seconds,
    )


def load_network_config(network: str, config_path: Path | None = None) -> StrategyConfig:
    """
    Load strategy configuration for a network.

    Args:
        network: Key in networks.yaml (e.g., 'ethereum')
        config_path: Path to an alternative networks file

    Returns:
        StrategyConfig with resolved URLs

    Raises:
        ConfigurationError: Unknown network, missing file, or no usable URLs
    """
    load_dotenv()

    try:
        data = get_network_config(network, config_path)
    except FileNotFoundError as e:
        raise ConfigurationError(str(e), details={"network": network}) from e
    except KeyError as e:
        raise ConfigurationError(
            f"Unknown network: {network}",
            details={"network": network},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Network entry must be a mapping: {network}",
            details={"network": network},
        )

    return strategy_config_from_dict(data, network)

#!/usr/bin/env python3
"""
strategy/jobs/run_call.py - CLI entrypoint for one multi-endpoint RPC call.

Prints the ExecutionResult as JSON.

Exit codes:
    0 - at least one endpoint succeeded
    1 - every endpoint failed
    2 - configuration error

Usage:
    python -m strategy.jobs.run_call eth_chainId --network ethereum
    python -m strategy.jobs.run_call eth_getBalance '["0xabc...", "latest"]' \\
        --url https://eth.merkle.io --url https://ethereum.publicnode.com --strategy parallel
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click
import httpx

from chains.client import NetworkClient
from core.constants import DEFAULT_TIMEOUT_SECONDS, StrategyType
from core.exceptions import ConfigurationError
from core.logging import get_logger, log_error, set_global_context, setup_logging
from core.models import ExecutionResult
from strategy.config import StrategyConfig, load_network_config

logger = get_logger("rpc.call")

EXIT_OK = 0
EXIT_ALL_FAILED = 1
EXIT_CONFIG_ERROR = 2


def parse_params(raw: str) -> list[Any]:
    """Parse the PARAMS argument (a JSON array)."""
    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"PARAMS must be a JSON array: {e}") from e
    if not isinstance(params, list):
        raise click.BadParameter("PARAMS must be a JSON array")
    return params


def build_config(
    network: str | None,
    config_path: str | None,
    urls: tuple[str, ...],
    strategy: str | None,
    timeout: float | None,
) -> StrategyConfig:
    """Explicit --url values win over the networks file."""
    if urls:
        config = StrategyConfig(
            type=strategy or StrategyType.FALLBACK.value,
            rpc_urls=list(urls),
            timeout_seconds=timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS,
        )
    else:
        if not network:
            raise ConfigurationError("Either --network or at least one --url is required")
        config = load_network_config(network, Path(config_path) if config_path else None)
        if strategy:
            config.type = strategy
        if timeout is not None:
            config.timeout_seconds = timeout
    return config


async def run_call(
    config: StrategyConfig,
    method: str,
    params: list[Any],
    client: httpx.AsyncClient | None = None,
) -> ExecutionResult:
    """Execute one call and release HTTP resources."""
    async with NetworkClient(config, client=client) as network_client:
        return await network_client.execute(method, params)


@click.command()
@click.argument("method")
@click.argument("params", default="[]")
@click.option("--network", "-n", default=None, help="Network key in networks.yaml")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Alternative networks.yaml")
@click.option("--url", "-u", "urls", multiple=True, help="RPC URL (repeatable, overrides --network)")
@click.option("--strategy", "-s", type=click.Choice([s.value for s in StrategyType]), default=None)
@click.option("--timeout", "-t", type=float, default=None, help="Per-request HTTP timeout in seconds")
@click.option("--log-level", "-l", default="WARNING", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]))
@click.option("--json-logs/--no-json-logs", default=True)
def main(
    method: str,
    params: str,
    network: str | None,
    config_path: str | None,
    urls: tuple[str, ...],
    strategy: str | None,
    timeout: float | None,
    log_level: str,
    json_logs: bool,
) -> None:
    """Send METHOD with PARAMS (JSON array) to the configured RPC endpoints."""
    setup_logging(level=log_level, json_output=json_logs)
    set_global_context(service="rpc-call")

    parsed_params = parse_params(params)

    try:
        config = build_config(network, config_path, urls, strategy, timeout)
        result = asyncio.run(run_call(config, method, parsed_params))
    except ConfigurationError as e:
        log_error(logger, e.code.value, e.message, **e.details)
        click.echo(json.dumps({"success": False, "error": e.to_dict()}, indent=2), err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    click.echo(json.dumps(result.to_dict(), indent=2, default=str))
    sys.exit(EXIT_OK if result.success else EXIT_ALL_FAILED)


if __name__ == "__main__":
    main()

"""
Pytest configuration and fixtures for RPC client tests.

No test touches the network: HTTP is served by FakeRpcNode through
httpx.MockTransport, injected as the shared client.
"""

import asyncio
import json
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Awaitable, Callable

import httpx
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


class FakeRpcNode:
    """
    In-memory JSON-RPC endpoints keyed by URL host.

    Unregistered hosts behave like unreachable servers (ConnectError).
    """

    def __init__(self):
        self._routes: dict[str, tuple[str, Any, float]] = {}
        self.calls: Counter = Counter()
        self.requests: list[tuple[str, dict, httpx.Headers]] = []

    @staticmethod
    def _host(url: str) -> str:
        return httpx.URL(url).host

    def result(self, url: str, value: Any, delay: float = 0.0, omit: bool = False) -> None:
        """Answer with {"result": value} (or no result field if omit)."""
        self._routes[self._host(url)] = ("omit" if omit else "result", value, delay)

    def rpc_error(self, url: str, message: str, code: int = -32000, data: Any = None) -> None:
        error = {"code": code, "message": message}
        if data is not None:
            error["data"] = data
        self._routes[self._host(url)] = ("error", error, 0.0)

    def http_status(self, url: str, status: int) -> None:
        self._routes[self._host(url)] = ("status", status, 0.0)

    def raw(self, url: str, content: bytes) -> None:
        self._routes[self._host(url)] = ("raw", content, 0.0)

    def timeout(self, url: str) -> None:
        self._routes[self._host(url)] = ("timeout", None, 0.0)

    def handler(self, url: str, func: Callable[[dict], Awaitable[Any]]) -> None:
        """Answer with the awaited return value of func(payload)."""
        self._routes[self._host(url)] = ("callback", func, 0.0)

    def calls_to(self, url: str) -> int:
        return self.calls[self._host(url)]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        payload = json.loads(request.content)
        self.calls[host] += 1
        self.requests.append((str(request.url), payload, request.headers))

        if host not in self._routes:
            raise httpx.ConnectError("Connection refused", request=request)

        kind, value, delay = self._routes[host]
        if delay:
            await asyncio.sleep(delay)

        base = {"jsonrpc": "2.0", "id": payload["id"]}
        if kind == "result":
            return httpx.Response(200, json={**base, "result": value})
        if kind == "omit":
            return httpx.Response(200, json=base)
        if kind == "error":
            return httpx.Response(200, json={**base, "error": value})
        if kind == "status":
            return httpx.Response(value, text="upstream unavailable")
        if kind == "raw":
            return httpx.Response(200, content=value)
        if kind == "timeout":
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, json={**base, "result": await value(payload)})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def rpc_node() -> FakeRpcNode:
    """Fresh fake node per test."""
    return FakeRpcNode()


@pytest.fixture
def http_client(rpc_node) -> httpx.AsyncClient:
    """Shared httpx client routed to rpc_node."""
    return rpc_node.client()

"""
chains/transport.py - JSON-RPC 2.0 transport for a single endpoint.

One transport = one URL + its own request id counter.
No retries here; retrying other endpoints is the strategy's job.
"""

import json
from typing import Any

import httpx

from core.constants import (
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_TIMEOUT_SECONDS,
    JSON_CONTENT_TYPE,
    JSONRPC_VERSION,
    ErrorCode,
)
from core.exceptions import ProtocolError, TransportError
from core.logging import get_logger
from core.time import elapsed_ms, monotonic_ms

logger = get_logger(__name__)


class JsonRpcTransport:
    """
    Issues JSON-RPC calls over HTTP POST to one endpoint.

    The request id starts at 1 and increments on every call, including
    calls that fail. The counter is owned by this instance and is only
    safe under a single event loop.

    An httpx.AsyncClient may be shared between transports; a shared
    client is never closed by the transport.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        self._url = url
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._owns_client = client is None
        self._request_id = 0

    @property
    def url(self) -> str:
        return self._url

    @property
    def request_id(self) -> int:
        """Last issued request id (0 before the first call)."""
        return self._request_id

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds),
                limits=httpx.Limits(max_connections=DEFAULT_MAX_CONNECTIONS),
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _next_request_id(self) -> int:
        self._request_id += 1
        return self._request_id

    def build_request(self, method: str, params: list | None = None) -> dict[str, Any]:
        """Build the JSON-RPC envelope (consumes one request id)."""
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": self._next_request_id(),
            "method": method,
            "params": params if params is not None else [],
        }

    async def call(self, method: str, params: list | None = None) -> Any:
        """
        Make one JSON-RPC call.

        Args:
            method: RPC method name (opaque)
            params: Positional parameters

        Returns:
            The response's result field verbatim (None is a valid result)

        Raises:
            TransportError: Network failure, timeout, or non-2xx status
            ProtocolError: Response carries an error envelope or is malformed
        """
        payload = self.build_request(method, params)
        context = {"url": self._url, "method": method, "request_id": payload["id"]}
        client = await self._get_client()
        start = monotonic_ms()

        try:
            resp = await client.post(
                self._url,
                json=payload,
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
        except httpx.TimeoutException as e:
            latency_ms = elapsed_ms(start)
            logger.debug(
                f"RPC timeout for {self._url}: {latency_ms}ms",
                extra={"context": context},
            )
            raise TransportError(
                f"Timeout after {latency_ms}ms",
                code=ErrorCode.INFRA_TIMEOUT,
                details={**context, "exception": type(e).__name__},
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(
                f"RPC network error for {self._url}: {e}",
                extra={"context": context},
            )
            raise TransportError(
                f"Network error: {e}",
                code=ErrorCode.INFRA_NETWORK_ERROR,
                details={**context, "exception": type(e).__name__},
            ) from e

        if not resp.is_success:
            logger.debug(
                f"RPC HTTP {resp.status_code} from {self._url}",
                extra={"context": {**context, "status_code": resp.status_code}},
            )
            raise TransportError(
                f"HTTP error! status: {resp.status_code}",
                code=ErrorCode.INFRA_HTTP_STATUS,
                details={**context, "status_code": resp.status_code},
                status_code=resp.status_code,
            )

        try:
            body = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ProtocolError(
                f"Invalid JSON-RPC response: {e}",
                code=ErrorCode.RPC_INVALID_RESPONSE,
                details=context,
            ) from e

        if not isinstance(body, dict):
            raise ProtocolError(
                f"Invalid JSON-RPC response: expected object, got {type(body).__name__}",
                code=ErrorCode.RPC_INVALID_RESPONSE,
                details=context,
            )

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                error_msg = error.get("message", str(error))
                rpc_code = error.get("code")
                rpc_data = error.get("data")
            else:
                error_msg, rpc_code, rpc_data = str(error), None, None
            logger.debug(
                f"RPC error from {self._url}: {error_msg}",
                extra={"context": {**context, "rpc_code": rpc_code}},
            )
            raise ProtocolError(
                f"RPC error: {error_msg}",
                details=context,
                rpc_code=rpc_code,
                rpc_data=rpc_data,
            )

        return body.get("result")

    def __repr__(self) -> str:
        return f"JsonRpcTransport(url={self._url!r}, request_id={self._request_id})"

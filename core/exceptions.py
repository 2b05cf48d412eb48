# PATH: core/exceptions.py
"""
Typed exceptions for the RPC client.

Per-call failures (TransportError, ProtocolError) never escape a
strategy's execute(); they are recorded as CallAttempt entries.
ConfigurationError is raised at construction time, before any I/O.
"""

from typing import Any, Optional

from core.constants import ErrorCode


class RpcClientError(Exception):
    """Base exception for the RPC client."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self):
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and CLI output."""
        return {
            "error_code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class RpcCallError(RpcClientError):
    """A single JSON-RPC call against one endpoint failed."""
    pass


class TransportError(RpcCallError):
    """HTTP/network-level failure (non-2xx status, connect error, timeout)."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INFRA_NETWORK_ERROR,
        details: Optional[dict] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, code, details)
        self.status_code = status_code


class ProtocolError(RpcCallError):
    """
    Endpoint answered with a JSON-RPC error envelope.

    rpc_code / rpc_data mirror the envelope's error.code / error.data.
    Also raised (with RPC_INVALID_RESPONSE) when the body is not a
    JSON-RPC response object at all.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RPC_ERROR_RESPONSE,
        details: Optional[dict] = None,
        rpc_code: Optional[int] = None,
        rpc_data: Any = None,
    ):
        super().__init__(message, code, details)
        self.rpc_code = rpc_code
        self.rpc_data = rpc_data


class ConfigurationError(RpcClientError):
    """Invalid client configuration (no endpoints, unknown strategy)."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
        details: Optional[dict] = None,
    ):
        super().__init__(message, code, details)

# PATH: core/constants.py
"""
Constants for the multi-endpoint RPC client.

Contains enums, defaults, and JSON-RPC wire constants.
"""

from enum import Enum
from typing import Final

# =============================================================================
# WIRE PROTOCOL
# =============================================================================

JSONRPC_VERSION: Final[str] = "2.0"
JSON_CONTENT_TYPE: Final[str] = "application/json"

# =============================================================================
# DEFAULTS
# =============================================================================

# Per-request HTTP timeout (httpx); the only deadline in the stack
DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0

DEFAULT_MAX_CONNECTIONS: Final[int] = 10

DEFAULT_NETWORKS_FILE: Final[str] = "networks.yaml"


class StrategyType(str, Enum):
    """Execution strategies selectable by config."""
    FALLBACK = "fallback"
    PARALLEL = "parallel"


class AttemptStatus(str, Enum):
    """Outcome of one endpoint for one logical call."""
    SUCCESS = "success"
    ERROR = "error"


class ErrorCode(str, Enum):
    """
    Error codes carried by every RpcClientError.

    INFRA_* codes come from the HTTP layer, RPC_* codes from the
    JSON-RPC envelope, CONFIG_* codes are raised at construction time.
    """
    # Transport
    INFRA_HTTP_STATUS = "INFRA_HTTP_STATUS"
    INFRA_NETWORK_ERROR = "INFRA_NETWORK_ERROR"
    INFRA_TIMEOUT = "INFRA_TIMEOUT"

    # Protocol
    RPC_ERROR_RESPONSE = "RPC_ERROR_RESPONSE"
    RPC_INVALID_RESPONSE = "RPC_INVALID_RESPONSE"

    # Configuration
    CONFIG_NO_ENDPOINTS = "CONFIG_NO_ENDPOINTS"
    CONFIG_UNKNOWN_STRATEGY = "CONFIG_UNKNOWN_STRATEGY"
    CONFIG_INVALID = "CONFIG_INVALID"

    # Other
    UNKNOWN = "UNKNOWN"

"""
core - Core utilities and models for the RPC client.

This package contains:
- models.py: Result models (CallAttempt, ExecutionMetadata, ExecutionResult)
- constants.py: Enums and constants
- exceptions.py: Typed exceptions with error codes
- fingerprint.py: Response fingerprinting
- time.py: Clock helpers
- logging.py: Structured JSON logging
"""

from core.constants import (
    AttemptStatus,
    ErrorCode,
    StrategyType,
)
from core.exceptions import (
    ConfigurationError,
    ProtocolError,
    RpcCallError,
    RpcClientError,
    TransportError,
)
from core.fingerprint import fingerprint
from core.logging import get_logger, setup_logging
from core.models import (
    CallAttempt,
    ExecutionMetadata,
    ExecutionResult,
)

__all__ = [
    # Constants
    "AttemptStatus",
    "ErrorCode",
    "StrategyType",
    # Exceptions
    "ConfigurationError",
    "ProtocolError",
    "RpcCallError",
    "RpcClientError",
    "TransportError",
    # Models
    "CallAttempt",
    "ExecutionMetadata",
    "ExecutionResult",
    # Fingerprint
    "fingerprint",
    # Logging
    "get_logger",
    "setup_logging",
]

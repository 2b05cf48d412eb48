"""
tests/unit/test_exceptions.py - Tests for core/exceptions.py

Tests for typed exceptions and error codes.
"""

import pytest

from core.exceptions import (
    ConfigurationError,
    ErrorCode,
    ProtocolError,
    RpcCallError,
    RpcClientError,
    TransportError,
)


class TestErrorCode:
    """Test ErrorCode enum."""

    def test_error_code_values(self):
        """Error codes have string values."""
        assert ErrorCode.INFRA_HTTP_STATUS.value == "INFRA_HTTP_STATUS"
        assert ErrorCode.RPC_ERROR_RESPONSE.value == "RPC_ERROR_RESPONSE"
        assert ErrorCode.CONFIG_NO_ENDPOINTS.value == "CONFIG_NO_ENDPOINTS"

    def test_error_code_is_string_enum(self):
        """ErrorCode is a string enum."""
        assert isinstance(ErrorCode.INFRA_TIMEOUT, str)
        assert ErrorCode.INFRA_TIMEOUT == "INFRA_TIMEOUT"


class TestRpcClientError:
    """Test RpcClientError base exception."""

    def test_creation(self):
        err = RpcClientError("Something failed")
        assert err.code == ErrorCode.UNKNOWN
        assert err.message == "Something failed"
        assert err.details == {}

    def test_str(self):
        err = RpcClientError("Timeout after 10000ms", code=ErrorCode.INFRA_TIMEOUT)
        assert str(err) == "[INFRA_TIMEOUT] Timeout after 10000ms"

    def test_to_dict(self):
        err = RpcClientError(
            "HTTP error! status: 502",
            code=ErrorCode.INFRA_HTTP_STATUS,
            details={"url": "https://node-a.test/rpc"},
        )
        d = err.to_dict()
        assert d["error_code"] == "INFRA_HTTP_STATUS"
        assert d["message"] == "HTTP error! status: 502"
        assert d["details"]["url"] == "https://node-a.test/rpc"


class TestTypedExceptions:
    """Test the error taxonomy."""

    def test_transport_error(self):
        err = TransportError("HTTP error! status: 503", code=ErrorCode.INFRA_HTTP_STATUS, status_code=503)
        assert isinstance(err, RpcCallError)
        assert err.status_code == 503

    def test_transport_error_default_code(self):
        assert TransportError("Network error: refused").code == ErrorCode.INFRA_NETWORK_ERROR

    def test_protocol_error(self):
        err = ProtocolError("RPC error: execution reverted", rpc_code=3, rpc_data="0x")
        assert isinstance(err, RpcCallError)
        assert err.code == ErrorCode.RPC_ERROR_RESPONSE
        assert err.rpc_code == 3
        assert err.rpc_data == "0x"

    def test_configuration_error_is_not_call_error(self):
        """Configuration errors are never swallowed as call failures."""
        err = ConfigurationError("At least one RPC URL must be provided", code=ErrorCode.CONFIG_NO_ENDPOINTS)
        assert isinstance(err, RpcClientError)
        assert not isinstance(err, RpcCallError)

    def test_raise_and_catch_base(self):
        with pytest.raises(RpcClientError):
            raise ProtocolError("RPC error: boom")

"""
tests/unit/test_models.py - Result model tests.
"""

import json

import pytest

from core.constants import AttemptStatus, StrategyType
from core.models import CallAttempt, ExecutionMetadata, ExecutionResult

NODE_A = "https://node-a.test/rpc"
NODE_B = "https://node-b.test/rpc"


@pytest.fixture
def ok_attempt():
    return CallAttempt.succeeded(NODE_A, 12, data={"number": "0x10"}, fingerprint="00ff00ff00ff00ff")


@pytest.fixture
def failed_attempt():
    return CallAttempt.failed(NODE_B, 30, "HTTP error! status: 502")


class TestCallAttempt:
    """Test CallAttempt."""

    def test_succeeded(self, ok_attempt):
        assert ok_attempt.status == AttemptStatus.SUCCESS
        assert ok_attempt.is_success
        assert ok_attempt.error is None

    def test_failed(self, failed_attempt):
        assert failed_attempt.status == AttemptStatus.ERROR
        assert not failed_attempt.is_success
        assert failed_attempt.data is None
        assert failed_attempt.fingerprint is None

    def test_to_dict_success(self, ok_attempt):
        assert ok_attempt.to_dict() == {
            "url": NODE_A,
            "status": "success",
            "response_time_ms": 12,
            "data": {"number": "0x10"},
            "fingerprint": "00ff00ff00ff00ff",
        }

    def test_to_dict_error(self, failed_attempt):
        assert failed_attempt.to_dict() == {
            "url": NODE_B,
            "status": "error",
            "response_time_ms": 30,
            "error": "HTTP error! status: 502",
        }


class TestExecutionMetadata:
    """Test ExecutionMetadata."""

    def test_defaults(self):
        metadata = ExecutionMetadata(strategy=StrategyType.FALLBACK, timestamp_ms=1_700_000_000_000)
        assert metadata.responses == []
        assert metadata.has_inconsistencies is False

    def test_split(self, ok_attempt, failed_attempt):
        metadata = ExecutionMetadata(
            strategy=StrategyType.PARALLEL,
            timestamp_ms=1_700_000_000_000,
            responses=[failed_attempt, ok_attempt],
        )
        assert metadata.successful() == [ok_attempt]
        assert metadata.failed() == [failed_attempt]

    def test_to_dict(self, ok_attempt):
        metadata = ExecutionMetadata(
            strategy=StrategyType.PARALLEL,
            timestamp_ms=1_700_000_000_000,
            responses=[ok_attempt],
        )
        d = metadata.to_dict()
        assert d["strategy"] == "parallel"
        assert d["timestamp"].startswith("2023-11-14T22:13:20")
        assert d["responses"][0]["url"] == NODE_A


class TestExecutionResult:
    """Test ExecutionResult."""

    def test_fallback_result_serializes(self):
        result = ExecutionResult(success=True, data="0x1")
        assert result.to_dict() == {"success": True, "data": "0x1"}
        assert result.successful_responses() == []

    def test_parallel_result_serializes_attempts(self, ok_attempt, failed_attempt):
        metadata = ExecutionMetadata(
            strategy=StrategyType.PARALLEL,
            timestamp_ms=1_700_000_000_000,
            responses=[ok_attempt, failed_attempt],
        )
        result = ExecutionResult(success=True, data=[ok_attempt, failed_attempt], metadata=metadata)

        d = result.to_dict()
        assert [r["status"] for r in d["data"]] == ["success", "error"]
        assert result.successful_responses() == [ok_attempt]
        json.dumps(d)

    def test_failure_serializes_errors(self, failed_attempt):
        result = ExecutionResult(success=False, errors=[failed_attempt])
        d = result.to_dict()
        assert "data" not in d
        assert d["errors"][0]["error"] == "HTTP error! status: 502"

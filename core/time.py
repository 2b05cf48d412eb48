# PATH: core/time.py
"""
Time utilities for the RPC client.

Wall-clock stamps for metadata, monotonic clock for latency.
"""

import time
from datetime import datetime, timezone


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Get current UTC datetime as ISO string."""
    return now_utc().isoformat()


def now_ms() -> int:
    """Get current Unix timestamp in milliseconds."""
    return int(time.time() * 1000)


def monotonic_ms() -> float:
    """Monotonic clock reading in milliseconds (not wall-clock)."""
    return time.perf_counter() * 1000


def elapsed_ms(start_ms: float) -> int:
    """
    Milliseconds elapsed since a monotonic_ms() reading.

    Never negative.
    """
    return max(0, int(monotonic_ms() - start_ms))


def ms_to_iso(timestamp_ms: int) -> str:
    """Render a Unix millisecond timestamp as UTC ISO string."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).isoformat()

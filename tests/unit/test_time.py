# PATH: tests/unit/test_time.py
"""
Unit tests for time utilities.
"""

import time
import unittest
from unittest.mock import patch

from core.time import (
    elapsed_ms,
    monotonic_ms,
    ms_to_iso,
    now_iso,
    now_ms,
    now_utc,
)


class TestNowFunctions(unittest.TestCase):
    """Tests for now_* functions."""

    def test_now_utc(self):
        """now_utc returns aware datetime."""
        dt = now_utc()
        self.assertIsNotNone(dt.tzinfo)

    def test_now_iso(self):
        """now_iso returns ISO string."""
        iso = now_iso()
        self.assertIn("T", iso)
        self.assertIn("+", iso)  # Has timezone

    def test_now_ms(self):
        """now_ms is an int close to time.time()."""
        ts = now_ms()
        self.assertIsInstance(ts, int)
        self.assertLess(abs(ts - time.time() * 1000), 5_000)


class TestElapsed(unittest.TestCase):
    """Tests for monotonic latency helpers."""

    def test_elapsed_is_int(self):
        start = monotonic_ms()
        self.assertIsInstance(elapsed_ms(start), int)

    def test_elapsed_counts_forward(self):
        with patch("core.time.time.perf_counter", return_value=2.5):
            self.assertEqual(elapsed_ms(1000.0), 1500)

    def test_elapsed_never_negative(self):
        with patch("core.time.time.perf_counter", return_value=1.0):
            self.assertEqual(elapsed_ms(5000.0), 0)


class TestMsToIso(unittest.TestCase):
    """Tests for ms_to_iso."""

    def test_epoch(self):
        self.assertEqual(ms_to_iso(0), "1970-01-01T00:00:00+00:00")

    def test_millis_kept(self):
        self.assertEqual(ms_to_iso(1_700_000_000_250), "2023-11-14T22:13:20.250000+00:00")


if __name__ == "__main__":
    unittest.main()

"""
core/fingerprint.py - Response fingerprinting.

Reduces a JSON-RPC result to a short stable string so responses from
different endpoints can be compared without keeping full payloads.

Canonical form: compact JSON with sorted object keys at every depth.
Hash: FNV-1a 64-bit (non-cryptographic, collision avoidance only).
"""

import json
from typing import Any

FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3
FNV64_MASK = 0xFFFFFFFFFFFFFFFF


def _normalize(value: Any) -> Any:
    """Integral floats become ints (1.0 and 1 are the same JSON number)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def canonicalize(value: Any) -> str:
    """
    Serialize a JSON value with stable key ordering.

    Two values that are equal as JSON produce the same string,
    regardless of object key insertion order or 1 vs 1.0.
    """
    return json.dumps(
        _normalize(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def fnv1a_64(data: bytes) -> int:
    """FNV-1a 64-bit hash."""
    h = FNV64_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV64_PRIME) & FNV64_MASK
    return h


def fingerprint(value: Any) -> str:
    """
    Fingerprint a response value.

    Returns:
        16-char lowercase hex digest of the canonical form

    Raises:
        RecursionError: Value nested deeper than the interpreter allows
    """
    # Lone surrogates are valid in JSON text but not in strict UTF-8
    data = canonicalize(value).encode("utf-8", errors="surrogatepass")
    return f"{fnv1a_64(data):016x}"

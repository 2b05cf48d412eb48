"""
chains/ - Blockchain node access layer.

Modules:
- transport: JSON-RPC 2.0 over HTTP to one endpoint
- client: NetworkClient facade (import from chains.client)
"""

from chains.transport import JsonRpcTransport

__all__ = [
    "JsonRpcTransport",
]

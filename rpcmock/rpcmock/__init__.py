"""rpcmock — network-free JSON-RPC 2.0 server double."""

from rpcmock.mock import (
    DEFAULT_DELAY,
    MockFetch,
    create_mock_fetch,
    create_mock_rpc_error_response,
    create_mock_rpc_response,
)
from rpcmock.registry import MockAction, Registry

__all__ = [
    "MockFetch",
    "MockAction",
    "Registry",
    "create_mock_fetch",
    "create_mock_rpc_response",
    "create_mock_rpc_error_response",
    "DEFAULT_DELAY",
]

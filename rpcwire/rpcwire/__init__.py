"""rpcwire — JSON-RPC 2.0 wire-format models and error kinds."""

from rpcwire.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    HttpError,
    RpcError,
    RpcErrorCode,
)
from rpcwire.jsonrpc import (
    JSONRPC_VERSION,
    RpcId,
    RpcRequest,
    RpcResponse,
    build_envelope,
    shape_params,
)

__all__ = [
    "RpcRequest",
    "RpcResponse",
    "RpcId",
    "RpcError",
    "RpcErrorCode",
    "HttpError",
    "build_envelope",
    "shape_params",
    "JSONRPC_VERSION",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]

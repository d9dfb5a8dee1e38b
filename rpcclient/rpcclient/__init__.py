"""rpcclient — JSON-RPC 2.0 request pipeline over a pluggable transport."""

from rpcclient.client import DEFAULT_REQUEST_OPTIONS, RpcClient, new_request_id
from rpcclient.hooks import Hooks, RequestContext, ResponseContext
from rpcclient.transport import DEFAULT_TIMEOUT, Fetch, HttpResponse, HttpxFetch

__all__ = [
    "RpcClient",
    "Hooks",
    "RequestContext",
    "ResponseContext",
    "Fetch",
    "HttpResponse",
    "HttpxFetch",
    "new_request_id",
    "DEFAULT_REQUEST_OPTIONS",
    "DEFAULT_TIMEOUT",
]

"""Pipeline stages a caller can plug into.

* ``before_fetch(RequestContext) -> RequestContext`` — may rewrite the URL
  or any request option, body included.
* ``on_response(ResponseContext) -> ResponseContext`` — success path only.
* ``on_error(Exception) -> Exception`` — the returned exception is raised.

Each defaults to identity.  Contexts are created fresh for every call and
never shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import httpx
from rpcwire import RpcResponse

from rpcclient.transport import HttpResponse


@dataclass(slots=True)
class RequestContext:
    """Outbound ``url`` + request options, as handed to the transport."""

    url: httpx.URL | str
    options: dict[str, Any]


@dataclass(slots=True)
class ResponseContext:
    """Inbound parsed envelope, raw transport response, and the result."""

    rpc_response: RpcResponse
    response: HttpResponse
    data: Any = None


BeforeFetch = Callable[[RequestContext], RequestContext]
OnResponse = Callable[[ResponseContext], ResponseContext]
OnError = Callable[[Exception], Exception]

T = TypeVar("T")


def _identity(value: T) -> T:
    return value


@dataclass(frozen=True, slots=True)
class Hooks:
    """Interception strategy for ``RpcClient``."""

    before_fetch: BeforeFetch = _identity
    on_response: OnResponse = _identity
    on_error: OnError = _identity

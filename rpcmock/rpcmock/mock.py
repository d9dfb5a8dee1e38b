"""In-memory JSON-RPC server standing in for the HTTP transport.

``MockFetch`` has the same call shape as ``rpcclient.HttpxFetch`` and
answers with real ``httpx.Response`` objects, so the client pipeline runs
unchanged against it:

* unknown method          → 200 + ``error`` (-32601), request id echoed
* action returns HttpError → that status/reason, body = error message
* action returns response → 200 + JSON, request id stamped over the action's
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from collections.abc import Mapping
from typing import Any

import anyio
import httpx
from rpcwire import METHOD_NOT_FOUND, HttpError, RpcError, RpcRequest, RpcResponse

from rpcmock.registry import MockAction

log = logging.getLogger(__name__)

DEFAULT_DELAY = 0.0  # seconds


def create_mock_rpc_response(result: Any) -> RpcResponse:
    """Successful response; the mock stamps the real id on the way out."""
    return RpcResponse(id=None, result=result)


def create_mock_rpc_error_response(
    code: int, message: str | None = None, data: Any = None
) -> RpcResponse:
    """Error response; reserved codes get their default message."""
    return RpcResponse(id=None, error=RpcError(code, message, data))


class MockFetch:
    """Transport that dispatches requests to *actions* by method name.

    Parameters
    ----------
    actions : Mapping[str, MockAction]
        Method name → action.  A ``Registry`` works too.
    delay : float
        Fixed wait before every answer, in seconds.
    """

    def __init__(self, actions: Mapping[str, MockAction], *, delay: float = DEFAULT_DELAY) -> None:
        self.actions = actions
        self.delay = delay

    async def __call__(self, url: httpx.URL | str, options: dict[str, Any]) -> httpx.Response:
        await anyio.sleep(self.delay)

        request = httpx.Request(options.get("method", "POST"), url)
        rpc_request = RpcRequest.from_dict(json.loads(options["content"]))
        log.debug("mock ← %s(id=%s)", rpc_request.method, rpc_request.id)

        action = self.actions.get(rpc_request.method)
        if action is None:
            rpc_response = RpcResponse.fail(rpc_request.id, METHOD_NOT_FOUND)
            return httpx.Response(200, json=rpc_response.to_dict(), request=request)

        result = action(rpc_request, options)
        if inspect.isawaitable(result):
            result = await result

        if isinstance(result, HttpError):
            return httpx.Response(
                result.status,
                text=result.message,
                request=request,
                extensions={"reason_phrase": result.status_text.encode("ascii", "replace")},
            )

        if rpc_request.id is not None:
            result = dataclasses.replace(result, id=rpc_request.id)
        return httpx.Response(200, json=result.to_dict(), request=request)


def create_mock_fetch(actions: Mapping[str, MockAction], delay: float = DEFAULT_DELAY) -> MockFetch:
    return MockFetch(actions, delay=delay)

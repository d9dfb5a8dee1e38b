"""RPC client — JSON-RPC 2.0 over any ``Fetch`` transport.

* ``call(method, *args, **kwargs)`` → ``ResponseContext`` (``.data`` is the result)

Failures are raised, never returned:

* ``HttpError``  — transport reported a non-success status (body unread)
* ``RpcError``   — response carried an ``error`` object
* anything else — parse errors, transport/hook exceptions, as ``on_error``
  returns them

Run directly for a quick demo against the in-memory mock::

    python -m rpcclient.client
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Literal

import httpx
from rpcwire import HttpError, RpcId, RpcResponse, build_envelope, shape_params

from rpcclient.hooks import Hooks, RequestContext, ResponseContext
from rpcclient.transport import DEFAULT_TIMEOUT, Fetch, HttpxFetch

log = logging.getLogger(__name__)

DEFAULT_REQUEST_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "headers": MappingProxyType({"Content-Type": "application/json"}),
        "method": "POST",
    }
)

IdGenerator = Callable[[], RpcId]


def new_request_id() -> str:
    """Random request id, suitable as an ``id_generator``."""
    return uuid.uuid4().hex


class RpcClient:
    """Async JSON-RPC 2.0 client with pluggable pipeline hooks.

    Parameters
    ----------
    url : str | httpx.URL
        Endpoint every call is sent to (``before_fetch`` may rewrite it).
    fetch : Fetch | None
        Transport.  Defaults to an owned ``HttpxFetch``.
    hooks : Hooks | None
        Interception strategy; identity stages when omitted.
    id_generator : callable | False | None
        Produces the ``id`` of each request.  ``None``/``False`` → ``id`` is null.
    fetch_options : mapping | None
        Request options merged over ``DEFAULT_REQUEST_OPTIONS`` key by key.
    timeout : float
        Request timeout for the owned ``HttpxFetch``.
    """

    def __init__(
        self,
        url: str | httpx.URL,
        *,
        fetch: Fetch | None = None,
        hooks: Hooks | None = None,
        id_generator: IdGenerator | Literal[False] | None = None,
        fetch_options: Mapping[str, Any] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.url = httpx.URL(str(url))
        self.hooks = hooks or Hooks()
        self.id_generator = id_generator or None
        self.fetch_options: Mapping[str, Any] = MappingProxyType(dict(fetch_options or {}))
        self._owned_fetch = HttpxFetch(timeout=timeout) if fetch is None else None
        self._fetch: Fetch = fetch or self._owned_fetch

    # -- Lifecycle -----------------------------------------------------

    async def close(self) -> None:
        if self._owned_fetch is not None:
            await self._owned_fetch.aclose()

    async def __aenter__(self) -> "RpcClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    # -- Request options -----------------------------------------------

    def _request_options(self, body: str) -> dict[str, Any]:
        options = {**DEFAULT_REQUEST_OPTIONS, **self.fetch_options}
        if isinstance(options.get("headers"), Mapping):
            options["headers"] = dict(options["headers"])
        options["content"] = body
        return options

    # -- Unary RPC -----------------------------------------------------

    async def call(self, method: str, /, *args: Any, **kwargs: Any) -> ResponseContext:
        """Send one JSON-RPC request and return its ``ResponseContext``.

        Positional arguments become a ``params`` array, keyword arguments a
        ``params`` object; a single mapping argument is sent as the object.
        """
        req_id = self.id_generator() if self.id_generator else None
        envelope = build_envelope(method, shape_params(args, kwargs), req_id)
        hooks = self.hooks

        log.debug("rpc → %s(id=%s)", method, req_id)

        try:
            body = json.dumps(envelope.to_dict())
            ctx = hooks.before_fetch(RequestContext(url=self.url, options=self._request_options(body)))
            resp = await self._fetch(ctx.url, ctx.options)
        except Exception as exc:
            raise hooks.on_error(exc)

        if not resp.is_success:
            raise HttpError(resp.status_code, resp.reason_phrase)

        try:
            rpc_response = RpcResponse.from_dict(resp.json())
            if rpc_response.error is not None:
                raise rpc_response.error
        except Exception as exc:
            log.debug("rpc ✗ %s(id=%s): %r", method, req_id, exc)
            raise hooks.on_error(exc)

        return hooks.on_response(
            ResponseContext(rpc_response=rpc_response, response=resp, data=rpc_response.result)
        )


# ── Demo entrypoint ──────────────────────────────────────────────────


async def _demo() -> None:
    from rpcmock import Registry, create_mock_fetch, create_mock_rpc_response

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    registry = Registry()

    @registry.handler("echo")
    def echo(rpc_request, options):
        return create_mock_rpc_response(rpc_request.params)

    @registry.handler("add")
    def add(rpc_request, options):
        return create_mock_rpc_response(sum(rpc_request.params))

    fetch = create_mock_fetch(registry, delay=0.1)
    async with RpcClient("http://mock/rpc", fetch=fetch, id_generator=new_request_id) as client:
        print("── echo ──")
        ctx = await client.call("echo", {"msg": "hello from client"})
        print(f"  result: {ctx.data}")

        print("── add ──")
        ctx = await client.call("add", 17, 25)
        print(f"  result: {ctx.data}")

        print("── missing ──")
        try:
            await client.call("missing")
        except Exception as exc:
            print(f"  error: {exc!r}")

        print("── done ──")


if __name__ == "__main__":
    import anyio

    anyio.run(_demo)

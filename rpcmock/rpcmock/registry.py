"""Mock method registry.

Handlers register themselves via the ``@registry.handler`` decorator.
The registry maps JSON-RPC method names to mock actions — nothing more.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Awaitable, Callable, Union

from rpcwire import HttpError, RpcRequest, RpcResponse

log = logging.getLogger(__name__)

# A mock action: (request, request options) -> response, or HttpError to
# simulate a transport failure.  May be a coroutine function.
MockResult = Union[RpcResponse, HttpError]
MockAction = Callable[[RpcRequest, dict[str, Any]], Union[MockResult, Awaitable[MockResult]]]


class Registry(Mapping[str, MockAction]):
    """A simple method → mock action mapping.

    Usage::

        registry = Registry()

        @registry.handler("echo")
        def echo(rpc_request, options):
            return create_mock_rpc_response(rpc_request.params)

        fetch = create_mock_fetch(registry)
    """

    def __init__(self, actions: Mapping[str, MockAction] | None = None) -> None:
        self._handlers: dict[str, MockAction] = dict(actions or {})

    # -- Registration --------------------------------------------------
    def handler(self, method: str) -> Callable[[MockAction], MockAction]:
        """Decorator that registers *fn* under *method*."""

        def decorator(fn: MockAction) -> MockAction:
            if method in self._handlers:
                log.warning("overwriting handler for %r", method)
            self._handlers[method] = fn
            log.debug("registered handler %r → %s", method, getattr(fn, "__qualname__", fn))
            return fn

        return decorator

    # -- Mapping -------------------------------------------------------
    def __getitem__(self, method: str) -> MockAction:
        return self._handlers[method]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    @property
    def methods(self) -> list[str]:
        return list(self._handlers.keys())

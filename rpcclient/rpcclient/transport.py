"""Transport seam.

The pipeline only needs ``async fetch(url, options) -> response`` where the
response looks like ``httpx.Response``.  ``HttpxFetch`` is the real one;
``rpcmock.MockFetch`` is the in-memory one.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0  # seconds


@runtime_checkable
class HttpResponse(Protocol):
    """The slice of ``httpx.Response`` the pipeline reads."""

    @property
    def is_success(self) -> bool: ...

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    def json(self, **kwargs: Any) -> Any: ...


@runtime_checkable
class Fetch(Protocol):
    """Send one request.  *options* uses ``httpx`` keyword names plus ``method``."""

    async def __call__(self, url: httpx.URL | str, options: dict[str, Any]) -> HttpResponse: ...


class HttpxFetch:
    """``Fetch`` backed by ``httpx.AsyncClient`` with connection pooling.

    Parameters
    ----------
    client : httpx.AsyncClient | None
        Client to send through.  When omitted one is created, owned and
        closed by ``aclose``.
    timeout : float
        Default request timeout in seconds for an owned client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def __call__(self, url: httpx.URL | str, options: dict[str, Any]) -> httpx.Response:
        kwargs = dict(options)
        method = kwargs.pop("method", "POST")
        resp = await self._client.request(method, url, **kwargs)
        if not resp.is_success:
            log.warning("%s %s → %d %s", method, url, resp.status_code, resp.reason_phrase)
        return resp

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

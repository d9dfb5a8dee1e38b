"""JSON-RPC 2.0 wire-format models and envelope codec.

Pure data — no I/O, no business logic.  Both the client pipeline and the
mock transport import these for serialisation only.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from rpcwire.errors import RpcError

JSONRPC_VERSION = "2.0"

RpcId = Union[str, int, None]


# ── Params shaping ───────────────────────────────────────────────────
def shape_params(
    args: Sequence[Any], kwargs: Mapping[str, Any] | None = None
) -> list[Any] | dict[str, Any] | None:
    """Turn call arguments into a single ``params`` value.

    * no arguments                     → ``None`` (``params`` omitted)
    * keyword arguments only           → ``dict(kwargs)``
    * exactly one mapping argument     → that mapping, unwrapped
    * anything else                    → ``list(args)``

    A lone list argument is *not* unwrapped: servers expect named params
    as an object and positional params as an array, never a singleton
    array holding the real arguments.
    """
    if kwargs:
        if args:
            raise ValueError("cannot mix positional and keyword params in one call")
        return dict(kwargs)
    if not args:
        return None
    if len(args) == 1 and isinstance(args[0], Mapping):
        return args[0]
    return list(args)


# ── Models ───────────────────────────────────────────────────────────
@dataclass(slots=True)
class RpcRequest:
    """Outbound JSON-RPC 2.0 request.

    ``id`` is always serialised, ``None`` included; ``params`` is dropped
    when ``None``.
    """

    method: str
    params: Any = None
    id: RpcId = None
    jsonrpc: str = JSONRPC_VERSION

    # -- Convenience ---------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.params is not None:
            d["params"] = self.params
        d["id"] = self.id
        return d

    @classmethod
    def from_dict(cls, raw: Any) -> "RpcRequest":
        """Parse a raw dict into a request — raises ``ValueError`` on bad input."""
        if not isinstance(raw, dict):
            raise ValueError("request must be a JSON object")
        method = raw.get("method")
        if not isinstance(method, str):
            raise ValueError("missing or invalid 'method' field")
        return cls(
            method=method,
            params=raw.get("params"),
            id=raw.get("id"),
            jsonrpc=raw.get("jsonrpc", JSONRPC_VERSION),
        )


@dataclass(slots=True)
class RpcResponse:
    """JSON-RPC 2.0 response.

    Exactly one of ``result``/``error`` is meaningful on a well-formed
    response; ``from_dict`` does not enforce that.
    """

    id: RpcId = None
    result: Any = None
    error: RpcError | None = None
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.error is not None:
            d["error"] = self.error.to_dict()
        else:
            d["result"] = self.result
        d["id"] = self.id
        return d

    @classmethod
    def from_dict(cls, raw: Any) -> "RpcResponse":
        if not isinstance(raw, dict):
            raise ValueError("response must be a JSON object")
        error = raw.get("error")
        return cls(
            id=raw.get("id"),
            result=raw.get("result"),
            error=RpcError.from_dict(error) if error is not None else None,
            jsonrpc=raw.get("jsonrpc", JSONRPC_VERSION),
        )

    # -- Factories -----------------------------------------------------
    @classmethod
    def success(cls, req_id: RpcId, result: Any) -> "RpcResponse":
        return cls(id=req_id, result=result)

    @classmethod
    def fail(
        cls, req_id: RpcId, code: int, message: str | None = None, data: Any = None
    ) -> "RpcResponse":
        return cls(id=req_id, error=RpcError(code, message, data))


def build_envelope(method: str, params: Any, id: RpcId) -> RpcRequest:
    """Assemble the outbound request; *method* is not validated."""
    return RpcRequest(method=method, params=params, id=id)

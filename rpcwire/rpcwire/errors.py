"""The two failure kinds a JSON-RPC call can end in.

* ``RpcError``  — protocol failure: the server answered, but with an
  ``error`` object (or the client synthesised one).
* ``HttpError`` — transport failure: the HTTP layer reported a non-success
  status and the body was never read as JSON-RPC.

They deliberately share no common base beyond ``Exception``; branch on
``kind`` or use ``match``::

    match exc:
        case RpcError(code=METHOD_NOT_FOUND): ...
        case HttpError(status=503): ...
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

UNKNOWN_ERROR_MESSAGE = "Unknown error"


# ── Standard error codes (JSON-RPC 2.0 §5.1) ────────────────────────
class RpcErrorCode(IntEnum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


PARSE_ERROR = RpcErrorCode.PARSE_ERROR
INVALID_REQUEST = RpcErrorCode.INVALID_REQUEST
METHOD_NOT_FOUND = RpcErrorCode.METHOD_NOT_FOUND
INVALID_PARAMS = RpcErrorCode.INVALID_PARAMS
INTERNAL_ERROR = RpcErrorCode.INTERNAL_ERROR


def default_message(code: int | None) -> str | None:
    """Humanised name of a reserved *code*, e.g. ``-32602`` → ``"invalid params"``."""
    try:
        member = RpcErrorCode(code)
    except (ValueError, TypeError):
        return None
    return member.name.replace("_", " ").lower()


# ── Errors ───────────────────────────────────────────────────────────
class RpcError(Exception):
    """JSON-RPC 2.0 error object, raised as an exception."""

    __match_args__ = ("code", "message", "data")
    kind = "rpc"

    def __init__(self, code: int | None, message: str | None = None, data: Any = None) -> None:
        if not message:
            message = default_message(code) or (
                UNKNOWN_ERROR_MESSAGE if message is None else message
            )
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)

    def __repr__(self) -> str:
        return f"RpcError(code={self.code!r}, message={self.message!r}, data={self.data!r})"

    def to_dict(self) -> dict[str, Any]:
        code = None if self.code is None else int(self.code)
        d: dict[str, Any] = {"code": code, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        return d

    @classmethod
    def from_dict(cls, raw: Any) -> "RpcError":
        """Build from a wire error object; anything but an object carries no fields."""
        if not isinstance(raw, dict):
            raw = {}
        return cls(raw.get("code"), raw.get("message"), raw.get("data"))


class HttpError(Exception):
    """Non-success HTTP outcome reported by the transport."""

    __match_args__ = ("status", "status_text")
    kind = "http"

    def __init__(self, status: int, status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        self.message = f"{status} {status_text}"
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"HttpError(status={self.status!r}, status_text={self.status_text!r})"

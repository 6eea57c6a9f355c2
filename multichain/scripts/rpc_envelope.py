"""Uniform response envelope returned by every facade call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from error_map import ProtocolError

T = TypeVar("T")


@dataclass(frozen=True)
class RpcError:
    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            out["data"] = self.data
        return out


@dataclass(frozen=True)
class RpcResponse(Generic[T]):
    """Result or node-reported error for one call.

    A node error never raises; check ``error`` (or ``ok``) before using
    ``result``. Both ``None`` is a successful call with no data, e.g. ping.
    """

    result: T | None = None
    error: RpcError | None = None
    id: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_error(raw: Any) -> RpcError:
    if not isinstance(raw, dict):
        raise ProtocolError(f"rpc error must be an object, got {type(raw).__name__}")
    code = raw.get("code")
    message = raw.get("message")
    if not isinstance(code, int) or isinstance(code, bool):
        raise ProtocolError("rpc error.code must be an integer")
    if not isinstance(message, str):
        raise ProtocolError("rpc error.message must be a string")
    return RpcError(code=code, message=message, data=raw.get("data"))


def split_envelope(document: Any) -> tuple[Any, RpcError | None, str | None]:
    """Return (raw_result, error, id) from a parsed JSON-RPC response."""
    if not isinstance(document, dict):
        raise ProtocolError(f"rpc response must be an object, got {type(document).__name__}")
    if "result" not in document and "error" not in document:
        raise ProtocolError("rpc response has neither result nor error")

    raw_id = document.get("id")
    response_id = None if raw_id is None else str(raw_id)

    raw_error = document.get("error")
    if raw_error is not None:
        return None, parse_error(raw_error), response_id
    return document.get("result"), None, response_id

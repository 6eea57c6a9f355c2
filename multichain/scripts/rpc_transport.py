"""HTTP JSON-RPC transport: one POST per call, no retries."""

from __future__ import annotations

import base64
import http.client
import json
import ssl
import urllib.error
import urllib.request
from socket import timeout as SocketTimeout
from typing import Any

from error_map import ProtocolError, RpcTimeoutError, TransportError


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _decode_json(raw: bytes) -> Any:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise ProtocolError(
            "rpc endpoint returned a body that is not utf-8",
            raw=raw.decode("utf-8", errors="replace"),
        ) from err
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise ProtocolError("rpc endpoint returned non-json response", raw=text) from err


def _is_rpc_document(raw: bytes) -> tuple[bool, Any]:
    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return False, None
    if isinstance(document, dict) and ("error" in document or "result" in document):
        return True, document
    return False, None


def invoke_rpc(
    *,
    url: str,
    payload: dict[str, Any],
    timeout_seconds: float,
    username: str = "",
    password: str = "",
    ssl_context: ssl.SSLContext | None = None,
) -> Any:
    body = json.dumps(payload).encode("utf-8")
    headers = {"Content-Type": "application/json"}
    if username:
        headers["Authorization"] = basic_auth_header(username, password)

    req = urllib.request.Request(url, data=body, method="POST", headers=headers)
    try:
        with urllib.request.urlopen(req, timeout=timeout_seconds, context=ssl_context) as resp:
            raw = resp.read()
    except SocketTimeout as err:
        raise RpcTimeoutError(f"request timed out after {timeout_seconds}s") from err
    except urllib.error.HTTPError as err:
        raw = err.read()
        # the node reports method errors as HTTP 500 with a JSON-RPC body
        is_document, document = _is_rpc_document(raw)
        if is_document:
            return document
        raise TransportError(f"http error {err.code}", status=err.code) from err
    except urllib.error.URLError as err:
        if isinstance(err.reason, SocketTimeout):
            raise RpcTimeoutError(f"request timed out after {timeout_seconds}s") from err
        raise TransportError(str(err.reason)) from err
    except (ConnectionError, ssl.SSLError) as err:
        raise TransportError(str(err)) from err
    except http.client.HTTPException as err:
        # malformed status line, truncated body and similar
        raise TransportError(f"bad http response: {err!r}") from err

    return _decode_json(raw)

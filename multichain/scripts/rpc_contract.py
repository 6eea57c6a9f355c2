"""Request descriptor and CLI request contract helpers."""

from __future__ import annotations

import json
import uuid
from argparse import Namespace
from dataclasses import dataclass, field
from typing import Any

from rpc_config import DEFAULT_TIMEOUT_SECONDS


def new_request_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RpcRequest:
    method: str
    params: list[Any] = field(default_factory=list)
    id: str = field(default_factory=new_request_id)
    chain_name: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "params": list(self.params),
            "id": self.id,
            "chain_name": self.chain_name,
        }


def parse_request_from_args(args: Namespace) -> dict[str, Any]:
    if args.request_file:
        with open(args.request_file, encoding="utf-8") as f:
            return json.load(f)
    if args.request_json:
        return json.loads(args.request_json)

    req: dict[str, Any] = {
        "method": args.method or "",
        "params": json.loads(args.params_json) if args.params_json else [],
        "timeout_seconds": args.timeout_seconds,
    }
    if args.id_json:
        req["id"] = json.loads(args.id_json)
    if args.chain_name:
        req["chain_name"] = args.chain_name
    return req


def validate_request(req: dict[str, Any]) -> tuple[bool, str]:
    if not isinstance(req, dict):
        return False, "request must be an object"

    method = req.get("method")
    if not isinstance(method, str) or not method.strip():
        return False, "request.method must be a non-empty string"

    params = req.get("params", [])
    if not isinstance(params, list):
        return False, "request.params must be an array"

    timeout = req.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        return False, "request.timeout_seconds must be a positive number"

    chain_name = req.get("chain_name")
    if chain_name is not None and (not isinstance(chain_name, str) or not chain_name.strip()):
        return False, "request.chain_name must be a non-empty string"

    request_id = req.get("id")
    if request_id is not None and not isinstance(request_id, (str, int)):
        return False, "request.id must be a string or integer"

    return True, ""

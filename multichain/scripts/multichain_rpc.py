#!/usr/bin/env python3
"""Agent-facing JSON wrapper around the MultiChain JSON-RPC client."""

from __future__ import annotations

import argparse
import inspect
import json
import logging
import sys
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Callable

# Local imports for script execution (python3 scripts/multichain_rpc.py ...)
SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from client_factory import MultiChainClient  # noqa: E402
from error_map import (  # noqa: E402
    ERR_INTERNAL,
    ERR_INVALID_REQUEST,
    ERR_MANIFEST_NOT_FOUND,
    ERR_METHOD_DISABLED,
    ERR_METHOD_NOT_IN_MANIFEST,
    ERR_RPC_REMOTE,
    ConfigurationError,
    InvalidArgumentError,
    MultiChainRpcError,
    RpcTimeoutError,
)
from method_registry import DEFAULT_MANIFEST, load_json, load_manifest_by_method  # noqa: E402
from result_decoder import to_json  # noqa: E402
from rpc_config import RpcOptions, load_options  # noqa: E402
from rpc_contract import parse_request_from_args, validate_request  # noqa: E402
from rpc_dispatch import RpcDispatcher, Transport  # noqa: E402
from rpc_envelope import RpcResponse  # noqa: E402
from rpc_transport import invoke_rpc  # noqa: E402


def _json_dump(payload: Any, pretty: bool = True) -> str:
    return json.dumps(payload, indent=2 if pretty else None, sort_keys=False)


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


def _base_response(method: str) -> dict[str, Any]:
    return {
        "timestamp_utc": _timestamp(),
        "method": method,
        "status": "error",
        "ok": False,
        "error_code": ERR_INTERNAL,
        "error_message": "unset",
    }


def _build_error_payload(
    *,
    method: str,
    status: str,
    code: str,
    message: str,
    rpc_request: dict[str, Any] | None = None,
    error: dict[str, Any] | None = None,
    duration_ms: int | None = None,
) -> dict[str, Any]:
    payload = _base_response(method)
    payload.update(
        {
            "status": status,
            "ok": False,
            "error_code": code,
            "error_message": message,
        }
    )
    if rpc_request is not None:
        payload["rpc_request"] = rpc_request
    if error is not None:
        payload["error"] = error
    if duration_ms is not None:
        payload["duration_ms"] = duration_ms
    return payload


def _print_error(*, method: str, code: str, message: str, pretty: bool) -> None:
    payload = _build_error_payload(method=method, status="error", code=code, message=message)
    print(_json_dump(payload, pretty=pretty))


def _print_selected_value(value: Any, *, compact: bool) -> None:
    if isinstance(value, (dict, list)):
        print(_json_dump(value, pretty=not compact))
        return
    if value is None:
        print("null")
        return
    if isinstance(value, bool):
        print("true" if value else "false")
        return
    print(str(value))


def _check_manifest(
    method: str, manifest_by_method: dict[str, dict[str, Any]]
) -> dict[str, Any] | None:
    entry = manifest_by_method.get(method)
    if entry is None:
        return _build_error_payload(
            method=method,
            status="denied",
            code=ERR_METHOD_NOT_IN_MANIFEST,
            message=f"method {method!r} is not in the manifest",
        )
    if not bool(entry.get("enabled", True)):
        return _build_error_payload(
            method=method,
            status="denied",
            code=ERR_METHOD_DISABLED,
            message=f"method {method!r} is disabled in the manifest",
        )
    return None


def _execute(
    *,
    method: str,
    rpc_request: dict[str, Any],
    invoke: Callable[[], RpcResponse[Any]],
) -> tuple[int, dict[str, Any]]:
    start = time.perf_counter()
    try:
        response = invoke()
    except ConfigurationError as err:
        return 2, _build_error_payload(method=method, status="error", code=err.code, message=str(err))
    except InvalidArgumentError as err:
        return 2, _build_error_payload(
            method=method, status="error", code=err.code, message=str(err), rpc_request=rpc_request
        )
    except MultiChainRpcError as err:
        status = "timeout" if isinstance(err, RpcTimeoutError) else "error"
        return (
            1,
            _build_error_payload(
                method=method,
                status=status,
                code=err.code,
                message=str(err),
                rpc_request=rpc_request,
                duration_ms=int((time.perf_counter() - start) * 1000),
            ),
        )
    duration_ms = int((time.perf_counter() - start) * 1000)

    if response.error is not None:
        return (
            1,
            _build_error_payload(
                method=method,
                status="error",
                code=ERR_RPC_REMOTE,
                message=response.error.message,
                rpc_request=rpc_request,
                error=response.error.to_dict(),
                duration_ms=duration_ms,
            ),
        )

    payload = {
        "timestamp_utc": _timestamp(),
        "method": method,
        "status": "ok",
        "ok": True,
        "error_code": None,
        "error_message": None,
        "rpc_request": rpc_request,
        "result": to_json(response.result),
        "error": None,
        "duration_ms": duration_ms,
    }
    return 0, payload


def run_rpc_request(
    *,
    req: dict[str, Any],
    manifest_by_method: dict[str, dict[str, Any]],
    options: RpcOptions,
    transport: Transport = invoke_rpc,
) -> tuple[int, dict[str, Any]]:
    valid, validation_message = validate_request(req)
    if not valid:
        method = str(req.get("method", "")) if isinstance(req, dict) else ""
        return 2, _build_error_payload(
            method=method, status="error", code=ERR_INVALID_REQUEST, message=validation_message
        )

    method = str(req["method"]).strip()
    denied = _check_manifest(method, manifest_by_method)
    if denied is not None:
        return 4, denied

    dispatcher = RpcDispatcher(options, transport=transport)
    try:
        request = dispatcher.build_request(
            method,
            req.get("params", []),
            chain_name=req.get("chain_name"),
            id=req.get("id"),
        )
    except ConfigurationError as err:
        return 2, _build_error_payload(method=method, status="error", code=err.code, message=str(err))

    rpc_request = {"method": method, "id": request.id, "chain_name": request.chain_name}
    return _execute(
        method=method,
        rpc_request=rpc_request,
        invoke=lambda: dispatcher.call(
            method,
            request.params,
            chain_name=request.chain_name,
            id=request.id,
            timeout_seconds=req.get("timeout_seconds"),
        ),
    )


def run_facade_call(
    *,
    facade: str,
    args: list[Any],
    kwargs: dict[str, Any],
    manifest_by_method: dict[str, dict[str, Any]],
    client: MultiChainClient,
) -> tuple[int, dict[str, Any]]:
    try:
        fn = client.find_facade(facade)
    except KeyError as err:
        return 2, _build_error_payload(method=facade, status="error", code=ERR_INVALID_REQUEST, message=err.args[0])

    method = fn.__rpc_method__
    denied = _check_manifest(method, manifest_by_method)
    if denied is not None:
        return 4, denied

    try:
        inspect.signature(fn).bind(*args, **kwargs)
    except TypeError as err:
        return 2, _build_error_payload(method=method, status="error", code=ERR_INVALID_REQUEST, message=str(err))

    rpc_request = {"method": method, "facade": fn.__name__, "chain_name": kwargs.get("chain_name")}
    return _execute(method=method, rpc_request=rpc_request, invoke=lambda: fn(*args, **kwargs))


def _render_output(*, payload: dict[str, Any], compact: bool, result_only: bool) -> None:
    if result_only and bool(payload.get("ok", False)):
        _print_selected_value(payload.get("result"), compact=compact)
        return
    print(_json_dump(payload, pretty=not compact))


def _require_manifest(args: argparse.Namespace) -> tuple[bool, dict[str, dict[str, Any]] | int]:
    manifest_path = Path(args.manifest).resolve()
    if not manifest_path.exists():
        _print_error(
            method="",
            code=ERR_MANIFEST_NOT_FOUND,
            message=f"manifest not found: {manifest_path}",
            pretty=not args.compact,
        )
        return False, 2
    return True, load_manifest_by_method(manifest_path)


def _load_options_or_error(args: argparse.Namespace, **overrides: Any) -> RpcOptions | None:
    try:
        return load_options(config_file=args.config, **overrides)
    except ConfigurationError as err:
        _print_error(method="", code=err.code, message=str(err), pretty=not args.compact)
        return None


def cmd_exec(args: argparse.Namespace) -> int:
    ok_manifest, manifest_or_rc = _require_manifest(args)
    if not ok_manifest:
        return int(manifest_or_rc)
    manifest_by_method = manifest_or_rc

    try:
        req = parse_request_from_args(args)
    except (OSError, ValueError) as err:
        _print_error(method="", code=ERR_INVALID_REQUEST, message=str(err), pretty=not args.compact)
        return 2

    options = _load_options_or_error(args)
    if options is None:
        return 2

    exit_code, payload = run_rpc_request(req=req, manifest_by_method=manifest_by_method, options=options)
    _render_output(payload=payload, compact=bool(args.compact), result_only=bool(args.result_only))
    return exit_code


def cmd_call(args: argparse.Namespace) -> int:
    ok_manifest, manifest_or_rc = _require_manifest(args)
    if not ok_manifest:
        return int(manifest_or_rc)
    manifest_by_method = manifest_or_rc

    try:
        call_args = json.loads(args.args_json) if args.args_json else []
        call_kwargs = json.loads(args.kwargs_json) if args.kwargs_json else {}
    except ValueError as err:
        _print_error(method=args.facade, code=ERR_INVALID_REQUEST, message=str(err), pretty=not args.compact)
        return 2
    if not isinstance(call_args, list) or not isinstance(call_kwargs, dict):
        _print_error(
            method=args.facade,
            code=ERR_INVALID_REQUEST,
            message="--args-json must be an array and --kwargs-json an object",
            pretty=not args.compact,
        )
        return 2
    if args.chain_name:
        call_kwargs.setdefault("chain_name", args.chain_name)

    options = _load_options_or_error(args, timeout_seconds=args.timeout_seconds)
    if options is None:
        return 2

    exit_code, payload = run_facade_call(
        facade=args.facade,
        args=call_args,
        kwargs=call_kwargs,
        manifest_by_method=manifest_by_method,
        client=MultiChainClient(options),
    )
    _render_output(payload=payload, compact=bool(args.compact), result_only=bool(args.result_only))
    return exit_code


def cmd_supported_methods(args: argparse.Namespace) -> int:
    manifest_by_method = load_manifest_by_method(Path(args.manifest).resolve())
    methods = sorted(
        method for method, entry in manifest_by_method.items() if bool(entry.get("enabled", True))
    )
    print(json.dumps({"supported_methods": methods, "count": len(methods)}, indent=2))
    return 0


def cmd_manifest_summary(args: argparse.Namespace) -> int:
    manifest = load_json(Path(args.manifest).resolve())
    entries = manifest.get("entries", [])
    category_counts: dict[str, int] = {}
    disabled: list[str] = []
    for entry in entries:
        category = str(entry.get("category", "unknown"))
        category_counts[category] = category_counts.get(category, 0) + 1
        if not bool(entry.get("enabled", True)):
            disabled.append(str(entry.get("method")))
    payload = {
        "manifest": str(Path(args.manifest).resolve()),
        "count": len(entries),
        "category_counts": category_counts,
        "disabled_methods": sorted(disabled),
    }
    print(json.dumps(payload, indent=2))
    return 0


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--compact", action="store_true", help="compact JSON output")
    parser.add_argument("--result-only", action="store_true", help="print only result field")


def _add_connection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--manifest", default=str(DEFAULT_MANIFEST), help="method manifest path")
    parser.add_argument("--config", help="YAML connection config (defaults to $MULTICHAIN_CONFIG)")
    parser.add_argument("--chain-name", help="target chain (defaults to $MULTICHAIN_CHAIN_NAME)")
    parser.add_argument("--timeout-seconds", type=float, help="per-call timeout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    exec_parser = sub.add_parser("exec", help="Execute one JSON-RPC method allowed by the manifest")
    _add_connection_args(exec_parser)
    exec_parser.add_argument("--request-file", help="request JSON file")
    exec_parser.add_argument("--request-json", help="request JSON string")
    exec_parser.add_argument("--method", help="method name (if not using request JSON)")
    exec_parser.add_argument("--params-json", help="params list as JSON")
    exec_parser.add_argument("--id-json", help="id value as JSON")
    _add_output_args(exec_parser)
    exec_parser.set_defaults(func=cmd_exec)

    call_parser = sub.add_parser("call", help="Invoke a typed facade method by name")
    call_parser.add_argument("facade", help="facade method, e.g. get_block or getblock")
    _add_connection_args(call_parser)
    call_parser.add_argument("--args-json", help="positional arguments as a JSON array")
    call_parser.add_argument("--kwargs-json", help="keyword arguments as a JSON object")
    _add_output_args(call_parser)
    call_parser.set_defaults(func=cmd_call)

    list_parser = sub.add_parser("supported-methods", help="List enabled methods from manifest")
    list_parser.add_argument("--manifest", default=str(DEFAULT_MANIFEST), help="method manifest path")
    list_parser.set_defaults(func=cmd_supported_methods)

    summary_parser = sub.add_parser("manifest-summary", help="Print manifest summary")
    summary_parser.add_argument("--manifest", default=str(DEFAULT_MANIFEST), help="method manifest path")
    summary_parser.set_defaults(func=cmd_manifest_summary)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

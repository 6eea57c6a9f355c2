"""Stable error codes and exception types for the MultiChain client."""

from __future__ import annotations

ERR_CONFIG_INVALID = "CONFIG_INVALID"
ERR_CHAIN_NAME_REQUIRED = "CHAIN_NAME_REQUIRED"
ERR_RPC_TRANSPORT = "RPC_TRANSPORT"
ERR_RPC_TIMEOUT = "RPC_TIMEOUT"
ERR_RPC_PROTOCOL = "RPC_PROTOCOL"
ERR_RPC_REMOTE = "RPC_REMOTE"
ERR_RESULT_DECODE_FAILED = "RESULT_DECODE_FAILED"
ERR_INVALID_REQUEST = "INVALID_REQUEST"
ERR_METHOD_NOT_IN_MANIFEST = "METHOD_NOT_IN_MANIFEST"
ERR_METHOD_DISABLED = "METHOD_DISABLED"
ERR_MANIFEST_NOT_FOUND = "MANIFEST_NOT_FOUND"
ERR_INTERNAL = "INTERNAL"


class MultiChainRpcError(Exception):
    """Base for failures of the call itself (not node-reported errors)."""

    code = ERR_INTERNAL

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigurationError(MultiChainRpcError):
    code = ERR_CONFIG_INVALID


class InvalidArgumentError(MultiChainRpcError, ValueError):
    """Argument rejected before anything is sent to the node."""

    code = ERR_INVALID_REQUEST


class TransportError(MultiChainRpcError):
    """Connection, TLS or HTTP-level failure; safe for the caller to retry."""

    code = ERR_RPC_TRANSPORT

    def __init__(self, message: str, *, code: str | None = None, status: int | None = None) -> None:
        super().__init__(message, code=code)
        self.status = status


class RpcTimeoutError(TransportError):
    code = ERR_RPC_TIMEOUT


class ProtocolError(MultiChainRpcError):
    """Response body is not JSON or is not a JSON-RPC envelope."""

    code = ERR_RPC_PROTOCOL

    def __init__(self, message: str, *, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class DeserializationError(MultiChainRpcError):
    code = ERR_RESULT_DECODE_FAILED

    def __init__(self, message: str, *, path: str = "result") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path

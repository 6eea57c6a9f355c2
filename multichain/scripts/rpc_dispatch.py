"""Request dispatch: bind -> send -> parse envelope -> decode result."""

from __future__ import annotations

import logging
import ssl
import time
from typing import Any, Callable, TypeVar

from param_binder import resolve_chain_name
from result_decoder import decode_value
from rpc_config import RpcOptions
from rpc_contract import RpcRequest, new_request_id
from rpc_envelope import RpcResponse, split_envelope
from rpc_transport import invoke_rpc

logger = logging.getLogger(__name__)

Transport = Callable[..., Any]
F = TypeVar("F", bound=Callable[..., Any])


class RpcDispatcher:
    """Performs one JSON-RPC round trip per call against a configured node."""

    def __init__(self, options: RpcOptions, *, transport: Transport = invoke_rpc) -> None:
        self.options = options
        self.transport = transport
        self._ssl_context: ssl.SSLContext | None = None

    def ssl_context(self) -> ssl.SSLContext | None:
        """TLS context for this node, loaded on first use and reused after."""
        if self._ssl_context is None and self.options.use_ssl:
            self._ssl_context = self.options.ssl_context()
        return self._ssl_context

    def build_request(
        self,
        method: str,
        params: list[Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcRequest:
        return RpcRequest(
            method=method,
            params=list(params),
            id=str(id) if id is not None else new_request_id(),
            chain_name=resolve_chain_name(chain_name, self.options),
        )

    def send(self, request: RpcRequest, *, timeout_seconds: float | None = None) -> Any:
        options = self.options
        url = options.url
        timeout = timeout_seconds if timeout_seconds is not None else options.timeout_seconds
        start = time.perf_counter()
        try:
            return self.transport(
                url=url,
                payload=request.to_payload(),
                timeout_seconds=timeout,
                username=options.username,
                password=options.password,
                ssl_context=self.ssl_context(),
            )
        finally:
            logger.debug(
                "rpc %s id=%s chain=%s took %dms",
                request.method,
                request.id,
                request.chain_name,
                int((time.perf_counter() - start) * 1000),
            )

    def call(
        self,
        method: str,
        params: list[Any] | None = None,
        *,
        result_type: Any = Any,
        chain_name: str | None = None,
        id: str | None = None,
        timeout_seconds: float | None = None,
    ) -> RpcResponse[Any]:
        request = self.build_request(method, params or [], chain_name=chain_name, id=id)
        document = self.send(request, timeout_seconds=timeout_seconds)
        raw_result, error, response_id = split_envelope(document)
        if error is not None:
            logger.warning("rpc %s id=%s failed: [%s] %s", method, request.id, error.code, error.message)
            return RpcResponse(result=None, error=error, id=response_id)
        return RpcResponse(result=decode_value(raw_result, result_type), error=None, id=response_id)


def rpc_method(name: str) -> Callable[[F], F]:
    """Tag a facade method with the remote procedure it calls."""

    def wrap(fn: F) -> F:
        fn.__rpc_method__ = name  # type: ignore[attr-defined]
        return fn

    return wrap


def facade_methods(cls: type) -> dict[str, str]:
    registry: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            remote = getattr(value, "__rpc_method__", None)
            if remote and remote not in registry:
                registry[remote] = attr
    return registry


class RpcClient:
    """Base for category clients; every facade method goes through ``_call``."""

    category = ""

    def __init__(self, options: RpcOptions, *, dispatcher: RpcDispatcher | None = None) -> None:
        self.options = options
        self.dispatcher = dispatcher or RpcDispatcher(options)

    def _call(
        self,
        method: str,
        params: list[Any],
        result_type: Any = Any,
        *,
        chain_name: str | None = None,
        id: str | None = None,
        timeout_seconds: float | None = None,
    ) -> RpcResponse[Any]:
        return self.dispatcher.call(
            method,
            params,
            result_type=result_type,
            chain_name=chain_name,
            id=id,
            timeout_seconds=timeout_seconds,
        )

    def with_options(self, **overrides: Any) -> RpcClient:
        """Copy of this client with some options replaced, e.g. ``timeout_seconds``."""
        options = self.options.with_overrides(**overrides)
        return type(self)(options, dispatcher=RpcDispatcher(options, transport=self.dispatcher.transport))

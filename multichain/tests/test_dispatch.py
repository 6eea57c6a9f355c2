from __future__ import annotations

import logging
from typing import Any

import pytest

from error_map import ERR_CHAIN_NAME_REQUIRED, ConfigurationError, DeserializationError, ProtocolError
from rpc_config import RpcOptions
from rpc_dispatch import RpcClient, RpcDispatcher, facade_methods, rpc_method
from rpc_envelope import RpcError, RpcResponse, split_envelope

from ._multichain_helpers import CHAIN, _err, _NodeHandler, _ok, _options_for, _serve, _stop


class _RecordingTransport:
    def __init__(self, document: Any) -> None:
        self.document = document
        self.calls: list[dict[str, Any]] = []

    def __call__(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        return self.document


def test_request_body_carries_method_params_id_and_chain():
    server, url = _serve([_ok(42)])
    try:
        dispatcher = RpcDispatcher(_options_for(url))
        response = dispatcher.call("getblockcount", [], result_type=int, id="req-1")
        assert response == RpcResponse(result=42, error=None, id="req-1")
        assert _NodeHandler.calls == [
            {"method": "getblockcount", "params": [], "id": "req-1", "chain_name": CHAIN}
        ]
    finally:
        _stop(server)


def test_generated_ids_are_unique():
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(port=1, chain_name="c"), transport=transport)
    dispatcher.call("getblockcount")
    dispatcher.call("getblockcount")
    ids = [call["payload"]["id"] for call in transport.calls]
    assert len(set(ids)) == 2
    assert all(len(i) == 32 for i in ids)


def test_node_error_is_returned_not_raised(caplog):
    server, url = _serve([(500, _err(-708, "Asset with this name not found"))])
    try:
        dispatcher = RpcDispatcher(_options_for(url))
        with caplog.at_level(logging.WARNING, logger="rpc_dispatch"):
            response = dispatcher.call("getassetinfo", ["missing"], result_type=dict)
        assert response.result is None
        assert response.error == RpcError(code=-708, message="Asset with this name not found")
        assert not response.ok
        assert "getassetinfo" in caplog.text
    finally:
        _stop(server)


def test_null_result_and_null_error_is_success():
    transport = _RecordingTransport({"result": None, "error": None, "id": "p"})
    dispatcher = RpcDispatcher(RpcOptions(port=1, chain_name="c"), transport=transport)
    response = dispatcher.call("ping", result_type=None)
    assert response.ok
    assert response.result is None
    assert response.error is None


def test_explicit_chain_overrides_default():
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(port=1, chain_name="default"), transport=transport)
    dispatcher.call("getblockcount", chain_name="other")
    dispatcher.call("getblockcount")
    assert [c["payload"]["chain_name"] for c in transport.calls] == ["other", "default"]


def test_missing_chain_fails_before_network():
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(port=1), transport=transport)
    with pytest.raises(ConfigurationError) as exc:
        dispatcher.call("getblockcount")
    assert exc.value.code == ERR_CHAIN_NAME_REQUIRED
    assert transport.calls == []


def test_missing_port_fails_before_network():
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(chain_name="c"), transport=transport)
    with pytest.raises(ConfigurationError):
        dispatcher.call("getblockcount")
    assert transport.calls == []


def test_per_call_timeout_reaches_transport():
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(port=1, chain_name="c", timeout_seconds=9), transport=transport)
    dispatcher.call("getblockcount")
    dispatcher.call("getblockcount", timeout_seconds=0.5)
    assert [c["timeout_seconds"] for c in transport.calls] == [9, 0.5]


def test_result_of_wrong_shape_raises_deserialization_error():
    transport = _RecordingTransport({"result": "not-a-number", "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(port=1, chain_name="c"), transport=transport)
    with pytest.raises(DeserializationError):
        dispatcher.call("getblockcount", result_type=int)


@pytest.mark.parametrize(
    "document",
    [
        ["not", "an", "object"],
        {"id": "x"},
        {"result": None, "error": "boom", "id": "x"},
        {"result": None, "error": {"code": "x", "message": "m"}, "id": "x"},
    ],
)
def test_malformed_envelopes_raise_protocol_error(document):
    with pytest.raises(ProtocolError):
        split_envelope(document)


def test_facade_registry_and_with_options():
    class _Demo(RpcClient):
        category = "demo"

        @rpc_method("getblockcount")
        def get_block_count(self, *, chain_name=None, id=None):
            return self._call("getblockcount", [], int, chain_name=chain_name, id=id)

        def helper(self):
            return None

    assert facade_methods(_Demo) == {"getblockcount": "get_block_count"}

    transport = _RecordingTransport({"result": 3, "error": None, "id": "x"})
    options = RpcOptions(port=1, chain_name="c")
    client = _Demo(options, dispatcher=RpcDispatcher(options, transport=transport))
    quick = client.with_options(timeout_seconds=1)
    assert isinstance(quick, _Demo)
    assert quick.get_block_count().result == 3
    assert transport.calls[0]["timeout_seconds"] == 1.0
    assert client.options.timeout_seconds != 1.0


def test_tls_context_is_built_once_per_dispatcher(monkeypatch):
    built: list[Any] = []
    real = RpcOptions.ssl_context

    def counting(self: RpcOptions) -> Any:
        context = real(self)
        built.append(context)
        return context

    monkeypatch.setattr(RpcOptions, "ssl_context", counting)
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    dispatcher = RpcDispatcher(RpcOptions(port=1, chain_name="c", use_ssl=True), transport=transport)
    dispatcher.call("getblockcount")
    dispatcher.call("getblockcount")

    assert len(built) == 1
    assert transport.calls[0]["ssl_context"] is transport.calls[1]["ssl_context"] is built[0]
    assert transport.calls[0]["url"].startswith("https://")


def test_plain_http_sends_no_tls_context():
    transport = _RecordingTransport({"result": 1, "error": None, "id": "x"})
    RpcDispatcher(RpcOptions(port=1, chain_name="c"), transport=transport).call("getblockcount")
    assert transport.calls[0]["ssl_context"] is None

from __future__ import annotations

import hashlib
from typing import Any

import pytest

import result_models as m
from client_factory import MultiChainClient
from client_wallet import WalletRpcClient
from entities import (
    AssetEntity,
    Permission,
    PublishEntity,
    PublishMultiEntity,
    StreamEntity,
    StreamFilterEntity,
    StreamRestriction,
    TxFilterEntity,
    UpgradeEntity,
    cached_data,
    join_permissions,
    json_data,
    text_data,
)
from error_map import ERR_CHAIN_NAME_REQUIRED, ConfigurationError, DeserializationError

from ._multichain_helpers import CHAIN, NodeError, _NodeHandler, _ok, _options_for, _serve, _stop

ADDRESS = "1XXXXXXXKhXXXXXXTzXXXXXXY6XXXXXXX5UtyF"


class _FakeChain:
    """Just enough node state for binary caches and asset issuance."""

    def __init__(self) -> None:
        self.caches: dict[str, bytes] = {}
        self.assets: dict[str, dict[str, Any]] = {}

    def routes(self) -> dict[str, Any]:
        return {
            "createbinarycache": self.create_binary_cache,
            "appendbinarycache": self.append_binary_cache,
            "deletebinarycache": self.delete_binary_cache,
            "issue": self.issue,
            "getassetinfo": self.get_asset_info,
        }

    def create_binary_cache(self, params: list[Any]) -> str:
        identifier = f"cache{len(self.caches) + 1:04d}"
        self.caches[identifier] = b""
        return identifier

    def append_binary_cache(self, params: list[Any]) -> int:
        identifier, data = params
        if identifier not in self.caches:
            raise NodeError(-711, "Binary cache with this identifier not found")
        self.caches[identifier] += bytes.fromhex(data)
        return len(self.caches[identifier])

    def delete_binary_cache(self, params: list[Any]) -> None:
        if self.caches.pop(params[0], None) is None:
            raise NodeError(-711, "Binary cache with this identifier not found")
        return None

    def issue(self, params: list[Any]) -> str:
        address, asset, quantity, *rest = params
        units = rest[0] if rest else 1
        name = asset["name"] if isinstance(asset, dict) else asset
        txid = hashlib.sha256(f"{address}:{name}".encode("utf-8")).hexdigest()
        self.assets[name] = {
            "name": name,
            "issuetxid": txid,
            "assetref": f"{len(self.assets) + 10}-266-{txid[:4]}",
            "multiple": int(round(1 / units)),
            "units": units,
            "open": bool(asset.get("open", False)) if isinstance(asset, dict) else False,
            "details": {},
            "issueqty": quantity,
            "issueraw": int(round(quantity / units)),
            "subscribed": False,
        }
        return txid

    def get_asset_info(self, params: list[Any]) -> dict[str, Any]:
        identifier = params[0]
        for info in self.assets.values():
            if identifier in (info["name"], info["issuetxid"], info["assetref"]):
                return info
        raise NodeError(-708, "Asset with this name, ref or issue txid not found")


def _client(url: str, **overrides: Any) -> MultiChainClient:
    return MultiChainClient(_options_for(url, **overrides))


def _sent_params() -> list[list[Any]]:
    return [call["params"] for call in _NodeHandler.calls]


def test_factory_exposes_every_category_over_one_dispatcher():
    client = MultiChainClient(_options_for("http://127.0.0.1:1"))
    assert client.categories == [
        "general",
        "control",
        "generate",
        "mining",
        "network",
        "offchain",
        "raw",
        "utility",
        "wallet",
    ]
    assert client.get_client("wallet") is client.wallet
    assert client.get_client(WalletRpcClient) is client.wallet
    assert client.general.dispatcher is client.wallet.dispatcher
    with pytest.raises(KeyError):
        client.get_client("nonsense")


def test_from_env_reads_options():
    client = MultiChainClient.from_env(env={"MULTICHAIN_RPC_PORT": "6000", "MULTICHAIN_CHAIN_NAME": "c9"})
    assert client.options.port == 6000
    assert client.network.options.chain_name == "c9"


def test_find_facade_by_python_or_remote_name():
    client = MultiChainClient(_options_for("http://127.0.0.1:1"))
    assert client.find_facade("get_block").__rpc_method__ == "getblock"
    assert client.find_facade("getblock").__name__ == "get_block"
    with pytest.raises(KeyError):
        client.find_facade("get_block_as")


def test_explicit_and_inferred_chain_give_same_result():
    info = {"version": "2.3.3", "nodeversion": 20303901, "chainname": CHAIN, "balance": 0.0, "blocks": 12}
    server, url = _serve([_ok(info), _ok(info)])
    try:
        client = _client(url)
        inferred = client.control.get_info()
        explicit = client.control.get_info(chain_name=CHAIN)
        assert inferred.result == explicit.result
        assert inferred.result.version == "2.3.3"
        assert [c["chain_name"] for c in _NodeHandler.calls] == [CHAIN, CHAIN]
    finally:
        _stop(server)


def test_explicit_chain_targets_other_chain():
    server, url = _serve([_ok(3)])
    try:
        client = _client(url)
        assert client.general.get_block_count(chain_name="chain2").result == 3
        assert _NodeHandler.calls[0]["chain_name"] == "chain2"
    finally:
        _stop(server)


def test_inferred_call_without_default_chain_raises():
    server, url = _serve([])
    try:
        client = _client(url, chain_name=None)
        with pytest.raises(ConfigurationError) as exc:
            client.general.get_block_count()
        assert exc.value.code == ERR_CHAIN_NAME_REQUIRED
        assert _NodeHandler.calls == []
    finally:
        _stop(server)


def test_getblock_result_type_follows_format_flag():
    header = {"hash": "00ab", "height": 10, "confirmations": 2, "miner": ADDRESS, "time": 1700000000}
    v4_tx = {"txid": "t1", "version": 1, "vin": [], "vout": [{"value": 0.0, "n": 0}], "hex": "0100"}
    server, url = _serve(
        [
            _ok("0100deadbeef"),
            _ok({**header, "tx": ["t1"]}),
            _ok({**header, "tx": [v4_tx]}),
        ]
    )
    try:
        general = _client(url).general
        encoded = general.get_block_encoded(10)
        verbose = general.get_block_verbose("00ab")
        full = general.get_block(10, 4)

        assert encoded.result == "0100deadbeef"
        assert isinstance(verbose.result, m.GetBlockVerboseResult)
        assert verbose.result.tx == ["t1"]
        assert isinstance(full.result, m.GetBlockResultV4)
        assert full.result.tx[0].vout[0].n == 0
        assert _sent_params() == [["10", False], ["00ab", True], ["10", 4]]
    finally:
        _stop(server)


def test_get_block_as_rejects_mismatched_type_before_calling():
    server, url = _serve([])
    try:
        general = _client(url).general
        with pytest.raises(DeserializationError):
            general.get_block_as(m.GetBlockResultV1, 10, False)
        assert _NodeHandler.calls == []
    finally:
        _stop(server)


def test_getblock_unexpected_shape_raises():
    server, url = _serve([_ok("0100")])
    try:
        with pytest.raises(DeserializationError):
            _client(url).general.get_block(10, True)
    finally:
        _stop(server)


def test_get_raw_transaction_and_mempool_formats():
    server, url = _serve(
        [
            _ok("0100"),
            _ok({"txid": "t1", "hex": "0100", "confirmations": 3}),
            _ok(["t1", "t2"]),
            _ok({"t1": {"size": 200, "fee": 0.0, "depends": []}}),
        ]
    )
    try:
        client = _client(url)
        assert client.raw.get_raw_transaction("t1").result == "0100"
        assert client.raw.get_raw_transaction("t1", 1).result.confirmations == 3
        assert client.general.get_raw_mem_pool().result == ["t1", "t2"]
        assert client.general.get_raw_mem_pool(True).result["t1"].size == 200
        assert _sent_params() == [["t1"], ["t1", 1], [], [True]]
    finally:
        _stop(server)


def test_gettxout_for_spent_output_is_null_result():
    server, url = _serve([_ok(None)])
    try:
        response = _client(url).general.get_tx_out("t1", 0)
        assert response.ok
        assert response.result is None
        assert _sent_params() == [["t1", 0]]
    finally:
        _stop(server)


def test_ping_returns_empty_success():
    server, url = _serve([_ok(None)])
    try:
        response = _client(url).network.ping()
        assert response.result is None
        assert response.error is None
    finally:
        _stop(server)


def test_omitted_trailing_params_are_not_sent_as_null():
    server, url = _serve([_ok([]), _ok([]), _ok([]), _ok(5.0), _ok([])])
    try:
        client = _client(url)
        client.general.list_assets()
        client.general.list_assets(count=5)
        client.wallet.list_stream_items("stream1")
        client.wallet.get_balance()
        client.wallet.list_unspent(addresses=[ADDRESS])
        assert _sent_params() == [
            [],
            ["*", False, 5],
            ["stream1"],
            [],
            [1, 9999999, [ADDRESS]],
        ]
        assert all(None not in params for params in _sent_params())
    finally:
        _stop(server)


def test_binary_cache_create_append_delete():
    chain = _FakeChain()
    server, url = _serve(routes=chain.routes())
    try:
        utility = _client(url).utility
        identifier = utility.create_binary_cache().result
        assert identifier == "cache0001"

        assert utility.append_binary_cache(identifier, "68656c6c6f").result == 5
        assert utility.append_binary_cache(identifier, "21").result == 6

        deleted = utility.delete_binary_cache(identifier)
        assert deleted.ok
        assert deleted.result is None

        after = utility.append_binary_cache(identifier, "00")
        assert after.result is None
        assert after.error.code == -711
    finally:
        _stop(server)


def test_issue_then_get_asset_info_round_trip():
    chain = _FakeChain()
    server, url = _serve(routes=chain.routes())
    try:
        client = _client(url)
        txid = client.wallet.issue(ADDRESS, AssetEntity(name="gold"), 1000, 0.01).result
        info = client.general.get_asset_info(txid).result

        assert isinstance(info, m.GetAssetInfoResult)
        assert info.name == "gold"
        assert info.issuetxid == txid
        assert info.issueqty == 1000
        assert info.units == 0.01
        assert info.issueraw == 100000
        assert _NodeHandler.calls[0]["params"] == [ADDRESS, {"name": "gold", "open": True}, 1000, 0.01]
        assert _NodeHandler.calls[1]["params"] == [txid]
    finally:
        _stop(server)


def test_issue_without_units_omits_trailing_params():
    chain = _FakeChain()
    server, url = _serve(routes=chain.routes())
    try:
        client = _client(url)
        client.wallet.issue(ADDRESS, "silver", 50)
        missing = client.general.get_asset_info("copper")
        assert _NodeHandler.calls[0]["params"] == [ADDRESS, "silver", 50]
        assert missing.error.code == -708
    finally:
        _stop(server)


def test_stream_and_upgrade_helpers_build_create_params():
    server, url = _serve([_ok("tx1"), _ok("tx2"), _ok("tx3"), _ok("tx4")])
    try:
        wallet = _client(url).wallet
        wallet.create_stream(StreamEntity(name="s1"))
        restricted = StreamEntity(name="s2")
        restricted.add_restriction(StreamRestriction.WRITE)
        restricted.set_custom_field("purpose", "audit")
        wallet.create_stream(restricted)
        wallet.create_stream_from(ADDRESS, StreamEntity(name="s3", open=True))
        wallet.create_upgrade(UpgradeEntity(name="u1", protocol_version=20010))
        assert _sent_params() == [
            ["stream", "s1", False],
            ["stream", "s2", {"restrict": "write"}, {"purpose": "audit"}],
            [ADDRESS, "stream", "s3", True],
            ["upgrade", "u1", False, {"protocol-version": 20010}],
        ]
        assert [c["method"] for c in _NodeHandler.calls] == ["create", "create", "createfrom", "create"]
    finally:
        _stop(server)


def test_grant_joins_addresses_and_fills_interior_defaults():
    server, url = _serve([_ok("tx1"), _ok("tx2")])
    try:
        wallet = _client(url).wallet
        wallet.grant(ADDRESS, join_permissions(Permission.SEND, Permission.RECEIVE))
        wallet.grant(["a1", "a2"], Permission.MINE, start_block=10)
        assert _sent_params() == [
            [ADDRESS, "send,receive"],
            ["a1,a2", "mine", 0, 10],
        ]
    finally:
        _stop(server)


def test_get_addresses_verbose_records():
    server, url = _serve([_ok([ADDRESS]), _ok([{"address": ADDRESS, "ismine": True, "iswatchonly": False}])])
    try:
        wallet = _client(url).wallet
        assert wallet.get_addresses().result == [ADDRESS]
        records = wallet.get_addresses(True).result
        assert records[0].address == ADDRESS
        assert _sent_params() == [[], [True]]
    finally:
        _stop(server)


def test_stream_items_decode_to_records():
    item = {
        "publishers": [ADDRESS],
        "keys": ["k1"],
        "offchain": False,
        "available": True,
        "data": {"json": {"a": 1}},
        "confirmations": 1,
        "txid": "t9",
    }
    server, url = _serve([_ok([item])])
    try:
        items = _client(url).wallet.list_stream_key_items("stream1", "k1", count=1).result
        assert items[0].txid == "t9"
        assert items[0].data == {"json": {"a": 1}}
        assert _sent_params() == [["stream1", "k1", False, 1]]
    finally:
        _stop(server)


def test_control_rejects_unknown_pause_task_without_calling():
    server, url = _serve([])
    try:
        with pytest.raises(ValueError):
            _client(url).control.pause("everything")
        assert _NodeHandler.calls == []
    finally:
        _stop(server)


def test_network_rejects_unknown_addnode_action():
    client = MultiChainClient(_options_for("http://127.0.0.1:1"))
    with pytest.raises(ValueError):
        client.network.add_node("10.0.0.1:7447", "connect")


def test_correlation_id_is_echoed():
    server, url = _serve([_ok("00ff")])
    try:
        response = _client(url).general.get_best_block_hash(id="corr-7")
        assert response.id == "corr-7"
        assert _NodeHandler.calls[0]["id"] == "corr-7"
    finally:
        _stop(server)


def test_sign_raw_transaction_leaves_key_list_to_the_wallet():
    signed = {"hex": "0100ab", "complete": True}
    server, url = _serve([_ok(signed), _ok(signed), _ok(signed)])
    try:
        raw = _client(url).raw
        assert raw.sign_raw_transaction("0100", sighash_type="ALL").result.complete
        raw.sign_raw_transaction("0100", private_keys=["Vkey"])
        raw.sign_raw_transaction("0100")
        assert _sent_params() == [
            ["0100", [], None, "ALL"],
            ["0100", [], ["Vkey"]],
            ["0100"],
        ]
    finally:
        _stop(server)


def test_read_only_queries_are_repeatable():
    info = {"chain": "main", "chainname": CHAIN, "blocks": 42, "bestblockhash": "00aa", "difficulty": 6.1e-05}
    server, url = _serve(routes={"getblockchaininfo": lambda params: info, "getdifficulty": lambda params: 6.1e-05})
    try:
        general = _client(url).general
        first, second = general.get_blockchain_info(), general.get_blockchain_info()
        assert first.result == second.result
        assert first.result.blocks == 42
        assert general.get_difficulty().result == general.get_difficulty().result == 6.1e-05
        assert [c["method"] for c in _NodeHandler.calls] == [
            "getblockchaininfo",
            "getblockchaininfo",
            "getdifficulty",
            "getdifficulty",
        ]
    finally:
        _stop(server)


STREAM_FILTER_CODE = (
    "function filterstreamitem() { var item=getfilterstreamitem(); "
    "if (item.keys.length > 100) return 'At least two keys required';}"
)
TX_FILTER_CODE = (
    "function filtertransaction() { var tx=getfiltertransaction(); "
    "if (tx.vout.length > 100) return 'One output required';}"
)


def test_filter_helpers_build_create_params():
    server, url = _serve([_ok("f1"), _ok("f2"), _ok("f3"), _ok("f4")])
    try:
        wallet = _client(url).wallet
        wallet.create_stream_filter(StreamFilterEntity(name="sf1", js_code=STREAM_FILTER_CODE))
        wallet.create_stream_filter_from(ADDRESS, StreamFilterEntity(name="sf2", js_code=STREAM_FILTER_CODE))
        wallet.create_tx_filter(TxFilterEntity(name="tf1", js_code=TX_FILTER_CODE, for_entities=["root"]))
        wallet.create_tx_filter_from(ADDRESS, TxFilterEntity(name="tf2", js_code=TX_FILTER_CODE))
        assert _sent_params() == [
            ["streamfilter", "sf1", {}, STREAM_FILTER_CODE],
            [ADDRESS, "streamfilter", "sf2", {}, STREAM_FILTER_CODE],
            ["txfilter", "tf1", {"for": "root"}, TX_FILTER_CODE],
            [ADDRESS, "txfilter", "tf2", {}, TX_FILTER_CODE],
        ]
        assert [c["method"] for c in _NodeHandler.calls] == ["create", "createfrom", "create", "createfrom"]
    finally:
        _stop(server)


def test_filter_without_code_is_rejected_before_sending():
    server, url = _serve([])
    try:
        with pytest.raises(ValueError):
            _client(url).wallet.create_tx_filter(TxFilterEntity(name="empty"))
        assert _NodeHandler.calls == []
    finally:
        _stop(server)


def test_publish_helpers_send_single_key_or_key_list():
    server, url = _serve([_ok("t1"), _ok("t2"), _ok("t3"), _ok("t4")])
    try:
        wallet = _client(url).wallet
        wallet.publish_stream_item_key(PublishEntity("root", "k1", b"Some StreamItem Data", "offchain"))
        wallet.publish_stream_item_keys(PublishEntity("root", ["k1", "k2"], text_data("plain")))
        wallet.publish_stream_item_key_from(ADDRESS, PublishEntity("root", ["k1"], "00ff"))
        wallet.publish_stream_item_keys_from(ADDRESS, PublishEntity("root", ["k1", "k2"], cached_data("cache0001")))
        assert _sent_params() == [
            ["root", "k1", b"Some StreamItem Data".hex(), "offchain"],
            ["root", ["k1", "k2"], {"text": "plain"}],
            [ADDRESS, "root", "k1", "00ff"],
            [ADDRESS, "root", ["k1", "k2"], {"cache": "cache0001"}],
        ]
        assert [c["method"] for c in _NodeHandler.calls] == ["publish", "publish", "publishfrom", "publishfrom"]
    finally:
        _stop(server)


def test_publish_single_key_helper_rejects_several_keys():
    client = MultiChainClient(_options_for("http://127.0.0.1:1"))
    with pytest.raises(ValueError):
        client.wallet.publish_stream_item_key(PublishEntity("root", ["k1", "k2"], "00"))


def test_publish_multi_helpers_send_item_objects():
    multi = PublishMultiEntity(stream="root", options="offchain")
    multi.add(PublishEntity("root", "k1", b"\x01\x02"))
    multi.add(PublishEntity("stream2", ["k2", "k3"], json_data({"description": "x"}), "offchain"))
    items = [
        {"for": "root", "key": "k1", "data": "0102"},
        {"for": "stream2", "keys": ["k2", "k3"], "data": {"json": {"description": "x"}}, "options": "offchain"},
    ]
    server, url = _serve([_ok("t1"), _ok("t2")])
    try:
        wallet = _client(url).wallet
        wallet.publish_multi_stream_items(multi)
        wallet.publish_multi_stream_items_from(ADDRESS, multi)
        assert _sent_params() == [
            ["root", items, "offchain"],
            [ADDRESS, "root", items, "offchain"],
        ]
        assert [c["method"] for c in _NodeHandler.calls] == ["publishmulti", "publishmultifrom"]
    finally:
        _stop(server)

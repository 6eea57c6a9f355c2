from __future__ import annotations

import pytest

from entities import (
    MAX_END_BLOCK,
    AssetEntity,
    Permission,
    PublishEntity,
    PublishMultiEntity,
    StreamEntity,
    StreamFilterEntity,
    StreamRestriction,
    TxFilterEntity,
    UpgradeEntity,
    from_hex,
    join_permissions,
    text_data,
    to_hex,
)
from error_map import InvalidArgumentError


def test_hex_round_trip():
    assert to_hex("hello") == "68656c6c6f"
    assert from_hex("68656c6c6f") == "hello"


def test_join_permissions_validates_names():
    assert join_permissions(Permission.SEND, Permission.RECEIVE) == "send,receive"
    assert join_permissions("low1") == "low1"
    with pytest.raises(ValueError):
        join_permissions("teleport")


def test_max_end_block_is_uint32_max():
    assert MAX_END_BLOCK == 2**32 - 1


def test_asset_entity_params():
    asset = AssetEntity(name="gold")
    assert asset.to_params() == {"name": "gold", "open": True}
    restricted = AssetEntity(name="silver", open=False, restrict=["send", "receive"])
    assert restricted.to_params() == {"name": "silver", "open": False, "restrict": "send,receive"}


def test_entities_get_random_names():
    assert AssetEntity().name != AssetEntity().name
    assert len(StreamEntity().name) == 32


def test_stream_entity_restrictions_or_open():
    stream = StreamEntity(name="s1")
    assert stream.restrictions_or_open() is False
    assert StreamEntity(name="s2", open=True).restrictions_or_open() is True

    stream.add_restriction(StreamRestriction.WRITE)
    stream.add_restriction(StreamRestriction.OFFCHAIN)
    stream.add_restriction(StreamRestriction.WRITE)
    assert stream.restrictions_or_open() == {"restrict": "write,offchain"}

    with pytest.raises(ValueError):
        stream.add_restriction("fast")


def test_upgrade_entity_custom_fields():
    upgrade = UpgradeEntity(name="u1", protocol_version=20010, start_block=100)
    assert upgrade.custom_fields() == {"protocol-version": 20010, "startblock": 100}

    params_only = UpgradeEntity(name="u2", parameters={"maximum-block-size": 16777216})
    assert params_only.custom_fields() == {"maximum-block-size": 16777216}

    with pytest.raises(ValueError):
        UpgradeEntity(name="u3").custom_fields()


def test_filter_code_loses_whitespace_before_closing_brace():
    code = "function filtertransaction() { return 'no'; }  \n"
    tx_filter = TxFilterEntity(name="f1", js_code=code, for_entities=["asset1", "stream1"])
    assert tx_filter.create_params() == [
        "txfilter",
        "f1",
        {"for": "asset1,stream1"},
        "function filtertransaction() { return 'no';}",
    ]
    assert StreamFilterEntity(name="f2", js_code="x;").create_params() == ["streamfilter", "f2", {}, "x;"]


def test_filter_without_code_raises():
    with pytest.raises(InvalidArgumentError):
        StreamFilterEntity(js_code="   ").create_params()


def test_publish_entity_data_forms():
    assert PublishEntity("s", "k", b"hi").payload_data() == "6869"
    assert PublishEntity("s", "k", to_hex("hi")).payload_data() == "6869"
    assert PublishEntity("s", "k", text_data("hi")).payload_data() == {"text": "hi"}
    with pytest.raises(InvalidArgumentError):
        PublishEntity("s", "k", "not hex").payload_data()
    with pytest.raises(InvalidArgumentError):
        PublishEntity("s", "k", {"json": 1, "text": "x"}).payload_data()


def test_publish_entity_keys():
    assert PublishEntity("s", "k", "").key_list() == ["k"]
    assert PublishEntity("s", ["k"], "").single_key() == "k"
    with pytest.raises(InvalidArgumentError):
        PublishEntity("s", [], "").key_list()
    with pytest.raises(InvalidArgumentError):
        PublishEntity("s", ["a", "b"], "").single_key()


def test_publish_multi_entity_requires_items():
    with pytest.raises(InvalidArgumentError):
        PublishMultiEntity(stream="root").item_objects()

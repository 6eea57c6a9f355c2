from __future__ import annotations

from typing import Any

import pytest

import result_models as m
from error_map import DeserializationError
from result_decoder import check_result_type, decode_value, result_type_for, to_json


def test_scalars_are_strict():
    assert decode_value(5, int) == 5
    assert decode_value(5, float) == 5.0
    assert decode_value("abc", str) == "abc"
    assert decode_value(True, bool) is True
    with pytest.raises(DeserializationError):
        decode_value(True, int)
    with pytest.raises(DeserializationError):
        decode_value("5", int)
    with pytest.raises(DeserializationError):
        decode_value(1, bool)


def test_null_result_type():
    assert decode_value(None, None) is None
    with pytest.raises(DeserializationError):
        decode_value("unexpected", None)


def test_any_passes_values_through():
    raw = {"a": [1, "b", None]}
    assert decode_value(raw, Any) is raw


def test_optional_and_union_types():
    assert decode_value(None, m.GetTxOutResult | None) is None
    assert decode_value("deadbeef", str | dict[str, Any]) == "deadbeef"
    assert decode_value({"k": 1}, str | dict[str, Any]) == {"k": 1}
    with pytest.raises(DeserializationError):
        decode_value(None, str)


def test_record_uses_json_keys_and_ignores_unknown_keys():
    raw = {
        "value": 0.5,
        "n": 1,
        "scriptPubKey": {"asm": "OP_DUP", "hex": "76a9", "reqSigs": 1, "type": "pubkeyhash", "addresses": ["1abc"]},
        "assets": [],
        "somethingNew": True,
    }
    out = decode_value(raw, m.TxOutput)
    assert out.value == 0.5
    assert out.n == 1
    assert out.script_pub_key.req_sigs == 1
    assert out.script_pub_key.addresses == ["1abc"]


def test_missing_required_key_reports_path():
    with pytest.raises(DeserializationError) as exc:
        decode_value([{"txid": "t1"}], list[m.UnspentOutput])
    assert exc.value.path == "result[0]"
    assert "vout" in str(exc.value)


def test_wrong_nested_type_reports_path():
    raw = {"chunks": {"waiting": "lots"}, "bytes": {}}
    with pytest.raises(DeserializationError) as exc:
        decode_value(raw, m.GetChunkQueueInfoResult)
    assert exc.value.path == "result.chunks.waiting"


def test_dict_of_records():
    raw = {"t1": {"size": 250, "fee": 0.0, "time": 1, "height": 10, "depends": []}}
    out = decode_value(raw, dict[str, m.RawMemPoolEntry])
    assert out["t1"].size == 250
    assert out["t1"].depends == []


def test_getblock_flag_table():
    assert result_type_for("getblock", False) is str
    assert result_type_for("getblock", 0) is str
    assert result_type_for("getblock", True) is m.GetBlockVerboseResult
    assert result_type_for("getblock", 1) is m.GetBlockResultV1
    assert result_type_for("getblock", 2) is m.GetBlockResultV2
    assert result_type_for("getblock", 3) is m.GetBlockResultV3
    assert result_type_for("getblock", 4) is m.GetBlockResultV4
    with pytest.raises(ValueError):
        result_type_for("getblock", 5)


def test_other_flag_tables():
    assert result_type_for("getrawtransaction", 0) is str
    assert result_type_for("getrawtransaction", 1) is m.GetRawTransactionResult
    assert result_type_for("getrawmempool", False) == list[str]
    assert result_type_for("getrawmempool", True) == dict[str, m.RawMemPoolEntry]
    assert result_type_for("getaddresses", True) == list[m.GetAddressesResult]
    with pytest.raises(KeyError):
        result_type_for("getinfo", True)


def test_check_result_type_rejects_mismatched_request():
    assert check_result_type("getblock", 4, m.GetBlockResultV4) is m.GetBlockResultV4
    with pytest.raises(DeserializationError):
        check_result_type("getblock", 4, m.GetBlockResultV1)
    with pytest.raises(DeserializationError):
        check_result_type("getblock", False, m.GetBlockVerboseResult)


def test_to_json_restores_node_keys():
    item = decode_value({"txid": "t1", "vout": 0, "scriptPubKey": "76a9", "amount": 1.5}, m.UnspentOutput)
    out = to_json(item)
    assert out["txid"] == "t1"
    assert out["scriptPubKey"] == "76a9"
    assert "script_pub_key" not in out

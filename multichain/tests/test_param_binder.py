from __future__ import annotations

import pytest

from error_map import ERR_CHAIN_NAME_REQUIRED, ConfigurationError
from param_binder import ALL, MAX_COUNT, Opt, bind_params, is_absent, resolve_chain_name
from rpc_config import RpcOptions


def test_required_params_pass_through_in_order():
    assert bind_params("a", 1, False) == ["a", 1, False]


def test_trailing_omitted_optionals_are_not_sent():
    assert bind_params("asset1", Opt(None), Opt(None)) == ["asset1"]
    assert bind_params(Opt(None, ALL), Opt(None, False), Opt(None, MAX_COUNT), Opt(None)) == []


def test_interior_omitted_optional_takes_default():
    params = bind_params(Opt(None, ALL), Opt(None, False), Opt(10, MAX_COUNT), Opt(None))
    assert params == [ALL, False, 10]


def test_interior_omitted_optional_without_default_sends_null():
    assert bind_params("txid", Opt(None), Opt(True)) == ["txid", None, True]


def test_empty_collections_count_as_omitted():
    assert bind_params("x", Opt([]), Opt({}), Opt("")) == ["x"]
    assert bind_params("x", Opt([], []), Opt("k")) == ["x", [], "k"]


def test_false_and_zero_are_present_values():
    assert bind_params("x", Opt(False)) == ["x", False]
    assert bind_params("x", Opt(0)) == ["x", 0]
    assert not is_absent(False)
    assert not is_absent(0)
    assert is_absent(None)


def test_resolve_chain_name_prefers_explicit_value():
    options = RpcOptions(port=1, chain_name="default-chain")
    assert resolve_chain_name("other", options) == "other"
    assert resolve_chain_name(None, options) == "default-chain"
    assert resolve_chain_name("  ", options) == "default-chain"


def test_resolve_chain_name_without_any_chain_raises():
    with pytest.raises(ConfigurationError) as exc:
        resolve_chain_name(None, RpcOptions(port=1))
    assert exc.value.code == ERR_CHAIN_NAME_REQUIRED

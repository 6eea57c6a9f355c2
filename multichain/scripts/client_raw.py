"""Raw transaction and atomic exchange methods."""

from __future__ import annotations

from typing import Any

import result_models as m
from param_binder import Opt, bind_params
from result_decoder import result_type_for
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse


class RawRpcClient(RpcClient):
    category = "raw"

    @rpc_method("appendrawchange")
    def append_raw_change(
        self,
        tx_hex: str,
        address: str,
        native_fee: float | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(tx_hex, address, Opt(native_fee))
        return self._call("appendrawchange", params, str, chain_name=chain_name, id=id)

    @rpc_method("appendrawdata")
    def append_raw_data(
        self,
        tx_hex: str,
        data: str | dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self._call("appendrawdata", [tx_hex, data], str, chain_name=chain_name, id=id)

    @rpc_method("appendrawexchange")
    def append_raw_exchange(
        self,
        tx_hex: str,
        txid: str,
        vout: int,
        ask_assets: dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, Any]]:
        params = [tx_hex, txid, vout, ask_assets]
        return self._call("appendrawexchange", params, dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("completerawexchange")
    def complete_raw_exchange(
        self,
        tx_hex: str,
        txid: str,
        vout: int,
        ask_assets: dict[str, Any],
        data: str | dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(tx_hex, txid, vout, ask_assets, Opt(data))
        return self._call("completerawexchange", params, str, chain_name=chain_name, id=id)

    @rpc_method("createrawexchange")
    def create_raw_exchange(
        self,
        txid: str,
        vout: int,
        ask_assets: dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self._call("createrawexchange", [txid, vout, ask_assets], str, chain_name=chain_name, id=id)

    @rpc_method("createrawsendfrom")
    def create_raw_send_from(
        self,
        from_address: str,
        to_amounts: dict[str, Any],
        data: list[Any] | None = None,
        action: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        params = bind_params(from_address, to_amounts, Opt(data, []), Opt(action))
        return self._call("createrawsendfrom", params, Any, chain_name=chain_name, id=id)

    @rpc_method("createrawtransaction")
    def create_raw_transaction(
        self,
        inputs: list[dict[str, Any]],
        amounts: dict[str, Any],
        data: list[Any] | None = None,
        action: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        """Build a raw transaction.

        ``action`` may be "lock", "sign", "lock,sign", "send"; with a send
        action the node returns a txid instead of hex, hence ``Any``.
        """
        params = bind_params(inputs, amounts, Opt(data, []), Opt(action))
        return self._call("createrawtransaction", params, Any, chain_name=chain_name, id=id)

    @rpc_method("decoderawexchange")
    def decode_raw_exchange(
        self,
        tx_hex: str,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.DecodeRawExchangeResult]:
        params = bind_params(tx_hex, Opt(verbose, False))
        return self._call("decoderawexchange", params, m.DecodeRawExchangeResult, chain_name=chain_name, id=id)

    @rpc_method("decoderawtransaction")
    def decode_raw_transaction(
        self, tx_hex: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.DecodeRawTransactionResult]:
        return self._call(
            "decoderawtransaction", [tx_hex], m.DecodeRawTransactionResult, chain_name=chain_name, id=id
        )

    @rpc_method("disablerawtransaction")
    def disable_raw_transaction(
        self, tx_hex: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("disablerawtransaction", [tx_hex], str, chain_name=chain_name, id=id)

    @rpc_method("getrawtransaction")
    def get_raw_transaction(
        self,
        txid: str,
        verbose: bool | int = False,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        result_type = result_type_for("getrawtransaction", verbose)
        params = [txid, verbose] if verbose else [txid]
        return self._call("getrawtransaction", params, result_type, chain_name=chain_name, id=id)

    @rpc_method("sendrawtransaction")
    def send_raw_transaction(
        self,
        tx_hex: str,
        allow_high_fees: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(tx_hex, Opt(allow_high_fees))
        return self._call("sendrawtransaction", params, str, chain_name=chain_name, id=id)

    @rpc_method("signrawtransaction")
    def sign_raw_transaction(
        self,
        tx_hex: str,
        parent_outputs: list[dict[str, Any]] | None = None,
        private_keys: list[str] | None = None,
        sighash_type: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.SignRawTransactionResult]:
        params = bind_params(tx_hex, Opt(parent_outputs, []), Opt(private_keys), Opt(sighash_type))
        return self._call("signrawtransaction", params, m.SignRawTransactionResult, chain_name=chain_name, id=id)

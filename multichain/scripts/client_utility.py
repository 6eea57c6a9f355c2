"""Utility methods: binary cache, keys, multisig, fees, message checks."""

from __future__ import annotations

import result_models as m
from param_binder import MAX_COUNT, Opt, bind_params
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse


class UtilityRpcClient(RpcClient):
    category = "utility"

    @rpc_method("appendbinarycache")
    def append_binary_cache(
        self, identifier: str, data_hex: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[int]:
        """Append hex data to a binary cache; returns the cache size in bytes."""
        return self._call("appendbinarycache", [identifier, data_hex], int, chain_name=chain_name, id=id)

    @rpc_method("createbinarycache")
    def create_binary_cache(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("createbinarycache", [], str, chain_name=chain_name, id=id)

    @rpc_method("createkeypairs")
    def create_key_pairs(
        self, count: int | None = None, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[m.CreateKeyPairsResult]]:
        params = bind_params(Opt(count))
        return self._call("createkeypairs", params, list[m.CreateKeyPairsResult], chain_name=chain_name, id=id)

    @rpc_method("createmultisig")
    def create_multi_sig(
        self,
        n_required: int,
        keys: list[str],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.CreateMultiSigResult]:
        return self._call("createmultisig", [n_required, list(keys)], m.CreateMultiSigResult, chain_name=chain_name, id=id)

    @rpc_method("deletebinarycache")
    def delete_binary_cache(
        self, identifier: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        return self._call("deletebinarycache", [identifier], None, chain_name=chain_name, id=id)

    @rpc_method("estimatefee")
    def estimate_fee(self, num_blocks: int, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[float]:
        return self._call("estimatefee", [num_blocks], float, chain_name=chain_name, id=id)

    @rpc_method("estimatepriority")
    def estimate_priority(
        self, num_blocks: int, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[float]:
        return self._call("estimatepriority", [num_blocks], float, chain_name=chain_name, id=id)

    @rpc_method("txouttobinarycache")
    def tx_out_to_binary_cache(
        self,
        identifier: str,
        txid: str,
        vout: int,
        count_bytes: int | None = None,
        start_byte: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[int]:
        params = bind_params(identifier, txid, vout, Opt(count_bytes, MAX_COUNT), Opt(start_byte))
        return self._call("txouttobinarycache", params, int, chain_name=chain_name, id=id)

    @rpc_method("validateaddress")
    def validate_address(
        self, address_or_pubkey: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.ValidateAddressResult]:
        return self._call("validateaddress", [address_or_pubkey], m.ValidateAddressResult, chain_name=chain_name, id=id)

    @rpc_method("verifymessage")
    def verify_message(
        self,
        address: str,
        signature: str,
        message: str,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[bool]:
        return self._call("verifymessage", [address, signature, message], bool, chain_name=chain_name, id=id)

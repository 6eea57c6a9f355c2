"""Mining methods."""

from __future__ import annotations

from typing import Any

import result_models as m
from param_binder import Opt, bind_params
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse


class MiningRpcClient(RpcClient):
    category = "mining"

    @rpc_method("getblocktemplate")
    def get_block_template(
        self,
        json_request_object: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, Any]]:
        params = bind_params(Opt(json_request_object))
        return self._call("getblocktemplate", params, dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("getmininginfo")
    def get_mining_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetMiningInfoResult]:
        return self._call("getmininginfo", [], m.GetMiningInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getnetworkhashps")
    def get_network_hash_ps(
        self,
        blocks: int | None = None,
        height: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[float]:
        params = bind_params(Opt(blocks, 120), Opt(height))
        return self._call("getnetworkhashps", params, float, chain_name=chain_name, id=id)

    @rpc_method("prioritisetransaction")
    def prioritise_transaction(
        self,
        txid: str,
        priority_delta: float,
        fee_delta: int,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[bool]:
        params = [txid, priority_delta, fee_delta]
        return self._call("prioritisetransaction", params, bool, chain_name=chain_name, id=id)

    @rpc_method("submitblock")
    def submit_block(
        self,
        hex_data: str,
        json_parameters_object: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        params = bind_params(hex_data, Opt(json_parameters_object))
        return self._call("submitblock", params, Any, chain_name=chain_name, id=id)

"""Blockchain query methods (assets, blocks, streams, filters, permissions)."""

from __future__ import annotations

from typing import Any

import result_models as m
from param_binder import ALL, MAX_COUNT, Opt, bind_params
from result_decoder import check_result_type, result_type_for
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse


class GeneralRpcClient(RpcClient):
    category = "general"

    @rpc_method("getassetinfo")
    def get_asset_info(
        self,
        asset_identifier: str,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.GetAssetInfoResult]:
        params = bind_params(asset_identifier, Opt(verbose, False))
        return self._call("getassetinfo", params, m.GetAssetInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getbestblockhash")
    def get_best_block_hash(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("getbestblockhash", [], str, chain_name=chain_name, id=id)

    @rpc_method("getblock")
    def get_block(
        self,
        hash_or_height: str | int,
        verbose: bool | int = True,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        """Fetch a block; the result type is picked by ``verbose``.

        False/0 returns the hex-encoded block, True a verbose record and
        1..4 the versioned records (see ``result_decoder.POLYMORPHIC_RESULTS``).
        """
        result_type = result_type_for("getblock", verbose)
        params = bind_params(str(hash_or_height), verbose)
        return self._call("getblock", params, result_type, chain_name=chain_name, id=id)

    def get_block_as(
        self,
        result_type: Any,
        hash_or_height: str | int,
        verbose: bool | int = True,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        """Like ``get_block`` but the caller names the expected result type.

        Raises ``DeserializationError`` before the call when ``result_type``
        is not the type bound to ``verbose``.
        """
        check_result_type("getblock", verbose, result_type)
        return self.get_block(hash_or_height, verbose, chain_name=chain_name, id=id)

    def get_block_encoded(
        self, hash_or_height: str | int, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self.get_block(hash_or_height, False, chain_name=chain_name, id=id)

    def get_block_verbose(
        self, hash_or_height: str | int, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetBlockVerboseResult]:
        return self.get_block(hash_or_height, True, chain_name=chain_name, id=id)

    @rpc_method("getblockchaininfo")
    def get_blockchain_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetBlockchainInfoResult]:
        return self._call("getblockchaininfo", [], m.GetBlockchainInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getblockcount")
    def get_block_count(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[int]:
        return self._call("getblockcount", [], int, chain_name=chain_name, id=id)

    @rpc_method("getblockhash")
    def get_block_hash(self, index: int, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("getblockhash", [index], str, chain_name=chain_name, id=id)

    @rpc_method("getchaintips")
    def get_chain_tips(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[m.GetChainTipsResult]]:
        return self._call("getchaintips", [], list[m.GetChainTipsResult], chain_name=chain_name, id=id)

    @rpc_method("getdifficulty")
    def get_difficulty(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[float]:
        return self._call("getdifficulty", [], float, chain_name=chain_name, id=id)

    @rpc_method("getfiltercode")
    def get_filter_code(
        self, filter_identifier: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("getfiltercode", [filter_identifier], str, chain_name=chain_name, id=id)

    @rpc_method("getlastblockinfo")
    def get_last_block_info(
        self, skip: int | None = None, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetLastBlockInfoResult]:
        params = bind_params(Opt(skip))
        return self._call("getlastblockinfo", params, m.GetLastBlockInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getmempoolinfo")
    def get_mem_pool_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetMemPoolInfoResult]:
        return self._call("getmempoolinfo", [], m.GetMemPoolInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getrawmempool")
    def get_raw_mem_pool(
        self, verbose: bool = False, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[Any]:
        result_type = result_type_for("getrawmempool", verbose)
        params = [verbose] if verbose else []
        return self._call("getrawmempool", params, result_type, chain_name=chain_name, id=id)

    @rpc_method("getstreaminfo")
    def get_stream_info(
        self,
        stream_identifier: str,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.StreamEntityResult]:
        params = bind_params(stream_identifier, Opt(verbose, False))
        return self._call("getstreaminfo", params, m.StreamEntityResult, chain_name=chain_name, id=id)

    @rpc_method("gettxout")
    def get_tx_out(
        self,
        txid: str,
        n: int,
        include_mem_pool: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.GetTxOutResult | None]:
        params = bind_params(txid, n, Opt(include_mem_pool, True))
        return self._call("gettxout", params, m.GetTxOutResult | None, chain_name=chain_name, id=id)

    @rpc_method("gettxoutsetinfo")
    def get_tx_out_set_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetTxOutSetInfoResult]:
        return self._call("gettxoutsetinfo", [], m.GetTxOutSetInfoResult, chain_name=chain_name, id=id)

    @rpc_method("listassets")
    def list_assets(
        self,
        asset_identifiers: str | list[str] | None = None,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.GetAssetInfoResult]]:
        params = bind_params(Opt(asset_identifiers, ALL), Opt(verbose, False), Opt(count, MAX_COUNT), Opt(start))
        return self._call("listassets", params, list[m.GetAssetInfoResult], chain_name=chain_name, id=id)

    @rpc_method("listblocks")
    def list_blocks(
        self,
        block_set_identifier: str | int | list[Any],
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.ListBlocksResult]]:
        params = bind_params(block_set_identifier, Opt(verbose, False))
        return self._call("listblocks", params, list[m.ListBlocksResult], chain_name=chain_name, id=id)

    @rpc_method("listpermissions")
    def list_permissions(
        self,
        permissions: str | None = None,
        addresses: str | list[str] | None = None,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.ListPermissionsResult]]:
        params = bind_params(Opt(permissions, ALL), Opt(addresses, ALL), Opt(verbose, False))
        return self._call("listpermissions", params, list[m.ListPermissionsResult], chain_name=chain_name, id=id)

    @rpc_method("liststreamfilters")
    def list_stream_filters(
        self,
        filter_identifiers: str | list[str] | None = None,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.FilterResult]]:
        params = bind_params(Opt(filter_identifiers, ALL), Opt(verbose, False))
        return self._call("liststreamfilters", params, list[m.FilterResult], chain_name=chain_name, id=id)

    @rpc_method("liststreams")
    def list_streams(
        self,
        stream_identifiers: str | list[str] | None = None,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamEntityResult]]:
        params = bind_params(Opt(stream_identifiers, ALL), Opt(verbose, False), Opt(count, MAX_COUNT), Opt(start))
        return self._call("liststreams", params, list[m.StreamEntityResult], chain_name=chain_name, id=id)

    @rpc_method("listtxfilters")
    def list_tx_filters(
        self,
        filter_identifiers: str | list[str] | None = None,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.FilterResult]]:
        params = bind_params(Opt(filter_identifiers, ALL), Opt(verbose, False))
        return self._call("listtxfilters", params, list[m.FilterResult], chain_name=chain_name, id=id)

    @rpc_method("listupgrades")
    def list_upgrades(
        self,
        upgrade_identifiers: str | list[str] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.ListUpgradesResult]]:
        params = bind_params(Opt(upgrade_identifiers, ALL))
        return self._call("listupgrades", params, list[m.ListUpgradesResult], chain_name=chain_name, id=id)

    @rpc_method("runstreamfilter")
    def run_stream_filter(
        self,
        filter_identifier: str,
        tx_hash: str | None = None,
        vout: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.RunFilterResult]:
        params = bind_params(filter_identifier, Opt(tx_hash), Opt(vout))
        return self._call("runstreamfilter", params, m.RunFilterResult, chain_name=chain_name, id=id)

    @rpc_method("runtxfilter")
    def run_tx_filter(
        self,
        filter_identifier: str,
        tx_hex_or_id: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.RunFilterResult]:
        params = bind_params(filter_identifier, Opt(tx_hex_or_id))
        return self._call("runtxfilter", params, m.RunFilterResult, chain_name=chain_name, id=id)

    @rpc_method("teststreamfilter")
    def test_stream_filter(
        self,
        restrictions: dict[str, Any],
        javascript_code: str,
        tx_hash: str | None = None,
        vout: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.RunFilterResult]:
        params = bind_params(restrictions, javascript_code, Opt(tx_hash), Opt(vout))
        return self._call("teststreamfilter", params, m.RunFilterResult, chain_name=chain_name, id=id)

    @rpc_method("testtxfilter")
    def test_tx_filter(
        self,
        restrictions: dict[str, Any],
        javascript_code: str,
        tx_hex_or_id: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.RunFilterResult]:
        params = bind_params(restrictions, javascript_code, Opt(tx_hex_or_id))
        return self._call("testtxfilter", params, m.RunFilterResult, chain_name=chain_name, id=id)

    @rpc_method("verifychain")
    def verify_chain(
        self,
        check_level: int | None = None,
        num_blocks: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[bool]:
        params = bind_params(Opt(check_level, 3), Opt(num_blocks))
        return self._call("verifychain", params, bool, chain_name=chain_name, id=id)

    @rpc_method("verifypermission")
    def verify_permission(
        self,
        address: str,
        permission: str,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[bool]:
        return self._call("verifypermission", [address, permission], bool, chain_name=chain_name, id=id)

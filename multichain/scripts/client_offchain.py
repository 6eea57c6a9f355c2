"""Off-chain item storage methods."""

from __future__ import annotations

from typing import Any

import result_models as m
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse


class OffChainRpcClient(RpcClient):
    category = "offchain"

    @rpc_method("getchunkqueueinfo")
    def get_chunk_queue_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetChunkQueueInfoResult]:
        return self._call("getchunkqueueinfo", [], m.GetChunkQueueInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getchunkqueuetotals")
    def get_chunk_queue_totals(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetChunkQueueTotalsResult]:
        return self._call("getchunkqueuetotals", [], m.GetChunkQueueTotalsResult, chain_name=chain_name, id=id)

    @rpc_method("purgepublisheditems")
    def purge_published_items(
        self, items: str | list[Any], *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[Any]:
        return self._call("purgepublisheditems", [items], Any, chain_name=chain_name, id=id)

    @rpc_method("purgestreamitems")
    def purge_stream_items(
        self,
        stream_identifier: str,
        items: str | list[Any] | dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        return self._call("purgestreamitems", [stream_identifier, items], Any, chain_name=chain_name, id=id)

    @rpc_method("retrievestreamitems")
    def retrieve_stream_items(
        self,
        stream_identifier: str,
        items: str | list[Any] | dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        return self._call("retrievestreamitems", [stream_identifier, items], Any, chain_name=chain_name, id=id)

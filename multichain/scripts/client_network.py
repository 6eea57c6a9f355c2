"""Peer and network methods."""

from __future__ import annotations

import result_models as m
from error_map import InvalidArgumentError
from param_binder import Opt, bind_params
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse

ADD_NODE_ACTIONS = ("add", "remove", "onetry")


class NetworkRpcClient(RpcClient):
    category = "network"

    @rpc_method("addnode")
    def add_node(
        self, node: str, action: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        if action not in ADD_NODE_ACTIONS:
            raise InvalidArgumentError(f"action must be one of {', '.join(ADD_NODE_ACTIONS)}, got {action!r}")
        return self._call("addnode", [node, action], None, chain_name=chain_name, id=id)

    @rpc_method("getaddednodeinfo")
    def get_added_node_info(
        self,
        dns: bool,
        node: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.GetAddedNodeInfoResult]]:
        params = bind_params(dns, Opt(node))
        return self._call("getaddednodeinfo", params, list[m.GetAddedNodeInfoResult], chain_name=chain_name, id=id)

    @rpc_method("getconnectioncount")
    def get_connection_count(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[int]:
        return self._call("getconnectioncount", [], int, chain_name=chain_name, id=id)

    @rpc_method("getnettotals")
    def get_net_totals(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetNetTotalsResult]:
        return self._call("getnettotals", [], m.GetNetTotalsResult, chain_name=chain_name, id=id)

    @rpc_method("getnetworkinfo")
    def get_network_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetNetworkInfoResult]:
        return self._call("getnetworkinfo", [], m.GetNetworkInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getpeerinfo")
    def get_peer_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[m.GetPeerInfoResult]]:
        return self._call("getpeerinfo", [], list[m.GetPeerInfoResult], chain_name=chain_name, id=id)

    @rpc_method("ping")
    def ping(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[None]:
        return self._call("ping", [], None, chain_name=chain_name, id=id)

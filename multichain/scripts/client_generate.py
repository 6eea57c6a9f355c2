"""Block generation toggles."""

from __future__ import annotations

from param_binder import Opt, bind_params
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse


class GenerateRpcClient(RpcClient):
    category = "generate"

    @rpc_method("getgenerate")
    def get_generate(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[bool]:
        return self._call("getgenerate", [], bool, chain_name=chain_name, id=id)

    @rpc_method("gethashespersec")
    def get_hashes_per_sec(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[int]:
        return self._call("gethashespersec", [], int, chain_name=chain_name, id=id)

    @rpc_method("setgenerate")
    def set_generate(
        self,
        generate: bool,
        gen_proc_limit: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        params = bind_params(generate, Opt(gen_proc_limit))
        return self._call("setgenerate", params, None, chain_name=chain_name, id=id)

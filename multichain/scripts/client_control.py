"""Node control methods."""

from __future__ import annotations

from typing import Any

import result_models as m
from error_map import InvalidArgumentError
from param_binder import Opt, bind_params
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse

# Values accepted by pause/resume.
PAUSE_TASKS = ("incoming", "mining", "offchain")


class ControlRpcClient(RpcClient):
    category = "control"

    @rpc_method("clearmempool")
    def clear_mem_pool(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[None]:
        return self._call("clearmempool", [], None, chain_name=chain_name, id=id)

    @rpc_method("getblockchainparams")
    def get_blockchain_params(
        self,
        display_names: bool | None = None,
        with_upgrades: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, Any]]:
        params = bind_params(Opt(display_names, True), Opt(with_upgrades))
        return self._call("getblockchainparams", params, dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("getinfo")
    def get_info(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[m.GetInfoResult]:
        return self._call("getinfo", [], m.GetInfoResult, chain_name=chain_name, id=id)

    @rpc_method("getinitstatus")
    def get_init_status(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetInitStatusResult]:
        return self._call("getinitstatus", [], m.GetInitStatusResult, chain_name=chain_name, id=id)

    @rpc_method("getruntimeparams")
    def get_runtime_params(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[dict[str, Any]]:
        return self._call("getruntimeparams", [], dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("help")
    def help(self, command: str | None = None, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("help", bind_params(Opt(command)), str, chain_name=chain_name, id=id)

    @rpc_method("pause")
    def pause(self, tasks: str, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        _check_tasks(tasks)
        return self._call("pause", [tasks], str, chain_name=chain_name, id=id)

    @rpc_method("resume")
    def resume(self, tasks: str, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        _check_tasks(tasks)
        return self._call("resume", [tasks], str, chain_name=chain_name, id=id)

    @rpc_method("setlastblock")
    def set_last_block(
        self, hash_or_height: str | int, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("setlastblock", [hash_or_height], str, chain_name=chain_name, id=id)

    @rpc_method("setruntimeparam")
    def set_runtime_param(
        self, param: str, value: Any, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        return self._call("setruntimeparam", [param, value], None, chain_name=chain_name, id=id)

    @rpc_method("stop")
    def stop(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("stop", [], str, chain_name=chain_name, id=id)


def _check_tasks(tasks: str) -> None:
    names = [t.strip() for t in str(tasks).split(",") if t.strip()]
    if not names:
        raise InvalidArgumentError("tasks must name at least one of: " + ", ".join(PAUSE_TASKS))
    unknown = [t for t in names if t not in PAUSE_TASKS]
    if unknown:
        raise InvalidArgumentError(f"unknown task(s) {', '.join(unknown)}; expected: {', '.join(PAUSE_TASKS)}")

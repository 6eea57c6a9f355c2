"""Positional parameter binding for MultiChain JSON-RPC methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from error_map import ERR_CHAIN_NAME_REQUIRED, ConfigurationError
from rpc_config import RpcOptions

# Wildcard accepted by list-style methods, and the node's "no limit" count.
ALL = "*"
MAX_COUNT = 2147483647


@dataclass(frozen=True)
class Opt:
    """Optional positional argument.

    ``default`` is what goes on the wire when this argument is omitted but a
    later one is present; trailing omitted arguments are not sent at all.
    """

    value: Any
    default: Any = None


def is_absent(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)) and len(value) == 0:
        return True
    return False


def _present(param: Any) -> bool:
    if isinstance(param, Opt):
        return not is_absent(param.value)
    return True


def bind_params(*params: Any) -> list[Any]:
    last = -1
    for index, param in enumerate(params):
        if _present(param):
            last = index

    out: list[Any] = []
    for param in params[: last + 1]:
        if not isinstance(param, Opt):
            out.append(param)
        elif not is_absent(param.value):
            out.append(param.value)
        elif param.default is not None:
            out.append(param.default)
        else:
            out.append(param.value)
    return out


def resolve_chain_name(explicit: str | None, options: RpcOptions) -> str:
    if explicit is not None and str(explicit).strip():
        return str(explicit).strip()
    if options.chain_name:
        return options.chain_name
    raise ConfigurationError(
        "chain name not given and no default configured (set MULTICHAIN_CHAIN_NAME)",
        code=ERR_CHAIN_NAME_REQUIRED,
    )

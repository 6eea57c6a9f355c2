"""One object exposing every category client over a shared configuration."""

from __future__ import annotations

from typing import Any

from client_control import ControlRpcClient
from client_general import GeneralRpcClient
from client_generate import GenerateRpcClient
from client_mining import MiningRpcClient
from client_network import NetworkRpcClient
from client_offchain import OffChainRpcClient
from client_raw import RawRpcClient
from client_utility import UtilityRpcClient
from client_wallet import WalletRpcClient
from rpc_config import RpcOptions, load_options
from rpc_dispatch import RpcClient, RpcDispatcher, Transport
from rpc_transport import invoke_rpc

CLIENT_CLASSES: tuple[type[RpcClient], ...] = (
    GeneralRpcClient,
    ControlRpcClient,
    GenerateRpcClient,
    MiningRpcClient,
    NetworkRpcClient,
    OffChainRpcClient,
    RawRpcClient,
    UtilityRpcClient,
    WalletRpcClient,
)


class MultiChainClient:
    general: GeneralRpcClient
    control: ControlRpcClient
    generate: GenerateRpcClient
    mining: MiningRpcClient
    network: NetworkRpcClient
    offchain: OffChainRpcClient
    raw: RawRpcClient
    utility: UtilityRpcClient
    wallet: WalletRpcClient

    def __init__(self, options: RpcOptions, *, transport: Transport = invoke_rpc) -> None:
        self.options = options
        self.dispatcher = RpcDispatcher(options, transport=transport)
        self._clients: dict[str, RpcClient] = {}
        for cls in CLIENT_CLASSES:
            client = cls(options, dispatcher=self.dispatcher)
            self._clients[cls.category] = client
            setattr(self, cls.category, client)

    @classmethod
    def from_env(
        cls,
        *,
        env: dict[str, str] | None = None,
        config_file: str | None = None,
        transport: Transport = invoke_rpc,
        **overrides: Any,
    ) -> MultiChainClient:
        options = load_options(env=env, config_file=config_file, **overrides)
        return cls(options, transport=transport)

    @property
    def categories(self) -> list[str]:
        return list(self._clients)

    def get_client(self, cls_or_category: type[RpcClient] | str) -> RpcClient:
        category = cls_or_category if isinstance(cls_or_category, str) else cls_or_category.category
        try:
            return self._clients[category]
        except KeyError:
            raise KeyError(f"unknown client category {category!r}") from None

    def find_facade(self, name: str) -> Any:
        """Bound facade method by Python name (``get_block``) or remote name (``getblock``)."""
        for client in self._clients.values():
            attr = getattr(client, name, None)
            if callable(attr) and not name.startswith("_") and getattr(attr, "__rpc_method__", None):
                return attr
        for client in self._clients.values():
            for attr in vars(type(client)).values():
                if getattr(attr, "__rpc_method__", None) == name:
                    return getattr(client, attr.__name__)
        raise KeyError(f"no facade method named {name!r}")

"""Builders for entity parameters (assets, streams, filters, upgrades, stream items) and permissions."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from typing import Any

from error_map import InvalidArgumentError

MAX_END_BLOCK = 4294967295


class Permission:
    CONNECT = "connect"
    SEND = "send"
    RECEIVE = "receive"
    ISSUE = "issue"
    CREATE = "create"
    MINE = "mine"
    ACTIVATE = "activate"
    ADMIN = "admin"

    ALL = (CONNECT, SEND, RECEIVE, ISSUE, CREATE, MINE, ACTIVATE, ADMIN)


def join_permissions(*permissions: str) -> str:
    unknown = [p for p in permissions if p not in Permission.ALL and not p.startswith(("low", "high"))]
    if unknown:
        raise InvalidArgumentError(f"unknown permission(s): {', '.join(unknown)}")
    return ",".join(permissions)


def to_hex(text: str) -> str:
    return text.encode("utf-8").hex()


def from_hex(data: str) -> str:
    return bytes.fromhex(data).decode("utf-8")


def _random_name() -> str:
    return uuid.uuid4().hex


class StreamRestriction:
    WRITE = "write"
    READ = "read"
    ONCHAIN = "onchain"
    OFFCHAIN = "offchain"
    SALT = "salt"

    ALL = (WRITE, READ, ONCHAIN, OFFCHAIN, SALT)


@dataclass
class AssetEntity:
    name: str = field(default_factory=_random_name)
    open: bool = True
    restrict: list[str] = field(default_factory=list)

    def to_params(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "open": self.open}
        if self.restrict:
            out["restrict"] = ",".join(self.restrict)
        return out


@dataclass
class StreamEntity:
    name: str = field(default_factory=_random_name)
    open: bool = False
    restrictions: list[str] = field(default_factory=list)
    custom_fields: dict[str, Any] = field(default_factory=dict)

    entity_type = "stream"

    def add_restriction(self, restriction: str) -> None:
        if restriction not in StreamRestriction.ALL:
            raise InvalidArgumentError(f"unknown stream restriction {restriction!r}")
        if restriction not in self.restrictions:
            self.restrictions.append(restriction)

    def set_custom_field(self, key: str, value: Any) -> None:
        self.custom_fields[key] = value

    def restrictions_or_open(self) -> bool | dict[str, Any]:
        if self.restrictions:
            return {"restrict": ",".join(self.restrictions)}
        return self.open


@dataclass
class UpgradeEntity:
    """Upgrade proposal; ``parameters`` holds chain parameter changes by key."""

    name: str = field(default_factory=_random_name)
    protocol_version: int | None = None
    start_block: int = 0
    parameters: dict[str, Any] = field(default_factory=dict)

    entity_type = "upgrade"

    def custom_fields(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.protocol_version is not None:
            out["protocol-version"] = self.protocol_version
        out.update(self.parameters)
        if self.start_block:
            out["startblock"] = self.start_block
        if not out:
            raise InvalidArgumentError("upgrade must change the protocol version or at least one parameter")
        return out


@dataclass
class StreamFilterEntity:
    """Stream filter: JavaScript defining ``filterstreamitem()``."""

    name: str = field(default_factory=_random_name)
    js_code: str = ""

    entity_type = "streamfilter"

    def restrictions(self) -> dict[str, Any]:
        return {}

    def create_params(self) -> list[Any]:
        # the node rejects whitespace between the final ';' and the closing brace
        code = re.sub(r";\s+\}$", ";}", self.js_code.strip())
        if not code:
            raise InvalidArgumentError(f"{self.entity_type} {self.name!r} has no JavaScript code")
        return [self.entity_type, self.name, self.restrictions(), code]


@dataclass
class TxFilterEntity(StreamFilterEntity):
    """Transaction filter; ``for_entities`` limits it to transactions touching those assets or streams."""

    for_entities: list[str] = field(default_factory=list)

    entity_type = "txfilter"

    def restrictions(self) -> dict[str, Any]:
        if self.for_entities:
            return {"for": ",".join(self.for_entities)}
        return {}


DATA_FORMATS = ("json", "text", "cache")


def json_data(value: Any) -> dict[str, Any]:
    return {"json": value}


def text_data(text: str) -> dict[str, Any]:
    return {"text": text}


def cached_data(cache_identifier: str) -> dict[str, Any]:
    return {"cache": cache_identifier}


@dataclass
class PublishEntity:
    """One stream item to publish.

    ``data`` may be raw ``bytes`` (sent hex-encoded), a hex string, or one of
    ``json_data()``, ``text_data()``, ``cached_data()``.
    """

    stream: str
    keys: str | list[str]
    data: bytes | str | dict[str, Any]
    options: str | None = None

    def key_list(self) -> list[str]:
        keys = [self.keys] if isinstance(self.keys, str) else list(self.keys)
        if not keys:
            raise InvalidArgumentError("stream item needs at least one key")
        return keys

    def single_key(self) -> str:
        keys = self.key_list()
        if len(keys) != 1:
            raise InvalidArgumentError(f"expected exactly one key, got {len(keys)}")
        return keys[0]

    def payload_data(self) -> str | dict[str, Any]:
        if isinstance(self.data, (bytes, bytearray)):
            return bytes(self.data).hex()
        if isinstance(self.data, dict):
            if len(self.data) != 1 or next(iter(self.data)) not in DATA_FORMATS:
                raise InvalidArgumentError(f"data object must have exactly one of {', '.join(DATA_FORMATS)}")
            return dict(self.data)
        try:
            bytes.fromhex(self.data)
        except ValueError:
            raise InvalidArgumentError(
                "data string must be hex; pass bytes or text_data() for plain text"
            ) from None
        return self.data

    def to_item(self) -> dict[str, Any]:
        """Item object for publishmulti."""
        keys = self.key_list()
        item: dict[str, Any] = {"for": self.stream}
        if len(keys) == 1:
            item["key"] = keys[0]
        else:
            item["keys"] = keys
        item["data"] = self.payload_data()
        if self.options:
            item["options"] = self.options
        return item


@dataclass
class PublishMultiEntity:
    """Several items published in one transaction; ``stream`` is the default for items."""

    stream: str
    items: list[PublishEntity] = field(default_factory=list)
    options: str | None = None

    def add(self, item: PublishEntity) -> None:
        self.items.append(item)

    def item_objects(self) -> list[dict[str, Any]]:
        if not self.items:
            raise InvalidArgumentError("publishmulti needs at least one item")
        return [item.to_item() for item in self.items]

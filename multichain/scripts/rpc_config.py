"""Connection options for a MultiChain node: defaults, YAML file, environment."""

from __future__ import annotations

import os
import ssl
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from error_map import ConfigurationError

DEFAULT_HOSTNAME = "localhost"
DEFAULT_TIMEOUT_SECONDS = 20.0

ENV_PREFIX = "MULTICHAIN_"
ENV_CONFIG_FILE = "MULTICHAIN_CONFIG"

# option field -> key used in env (with prefix) and YAML (without)
OPTION_KEYS: dict[str, str] = {
    "chain_name": "CHAIN_NAME",
    "hostname": "HOSTNAME",
    "port": "RPC_PORT",
    "username": "USERNAME",
    "password": "PASSWORD",
    "use_ssl": "USE_SSL",
    "ssl_path": "SSL_PATH",
    "admin_address": "ADMIN_ADDRESS",
    "burn_address": "BURN_ADDRESS",
    "timeout_seconds": "TIMEOUT_SECONDS",
}

TRUE_STRINGS = {"1", "true", "yes", "on"}
FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class RpcOptions:
    hostname: str = DEFAULT_HOSTNAME
    port: int | None = None
    use_ssl: bool = False
    ssl_path: str = ""
    username: str = ""
    password: str = ""
    chain_name: str | None = None
    admin_address: str = ""
    burn_address: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def url(self) -> str:
        if self.port is None:
            raise ConfigurationError("rpc port is not configured (set MULTICHAIN_RPC_PORT)")
        scheme = "https" if self.use_ssl else "http"
        return f"{scheme}://{self.hostname}:{self.port}"

    def ssl_context(self) -> ssl.SSLContext | None:
        if not self.use_ssl:
            return None
        try:
            if self.ssl_path:
                return ssl.create_default_context(cafile=self.ssl_path)
            return ssl.create_default_context()
        except (OSError, ssl.SSLError) as err:
            raise ConfigurationError(f"failed loading ssl_path {self.ssl_path!r}: {err}") from err

    def with_overrides(self, **overrides: Any) -> RpcOptions:
        return replace(self, **_coerce_all(overrides, source="override"))

    def redacted(self) -> dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        if out["password"]:
            out["password"] = "***"
        return out


def _parse_bool(raw: Any, *, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")


def _parse_port(raw: Any, *, key: str) -> int | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ConfigurationError(f"{key} must be an integer port")
    try:
        port = int(str(raw).strip(), 10)
    except ValueError as err:
        raise ConfigurationError(f"{key} must be an integer port, got {raw!r}") from err
    if not 0 < port < 65536:
        raise ConfigurationError(f"{key} must be between 1 and 65535, got {port}")
    return port


def _parse_timeout(raw: Any, *, key: str) -> float:
    if isinstance(raw, bool):
        raise ConfigurationError(f"{key} must be a positive number")
    try:
        value = float(raw)
    except (TypeError, ValueError) as err:
        raise ConfigurationError(f"{key} must be a positive number, got {raw!r}") from err
    if value <= 0:
        raise ConfigurationError(f"{key} must be a positive number, got {raw!r}")
    return value


def _coerce(name: str, raw: Any, *, source: str) -> Any:
    key = f"{source}:{name}"
    if name == "port":
        return _parse_port(raw, key=key)
    if name == "use_ssl":
        return _parse_bool(raw, key=key)
    if name == "timeout_seconds":
        return _parse_timeout(raw, key=key)
    if name == "chain_name":
        value = "" if raw is None else str(raw).strip()
        return value or None
    return "" if raw is None else str(raw)


def _coerce_all(values: Mapping[str, Any], *, source: str) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name, raw in values.items():
        if name not in OPTION_KEYS:
            raise ConfigurationError(f"unknown option {source}:{name}")
        out[name] = _coerce(name, raw, source=source)
    return out


def options_from_env(env: Mapping[str, str]) -> dict[str, Any]:
    found: dict[str, Any] = {}
    for name, suffix in OPTION_KEYS.items():
        env_key = ENV_PREFIX + suffix
        if env_key in env:
            found[name] = env[env_key]
    return _coerce_all(found, source="env")


def options_from_file(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as err:
        raise ConfigurationError(f"failed reading config file {path}: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigurationError(f"invalid YAML in config file {path}: {err}") from err
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")

    by_yaml_key = {suffix.lower(): name for name, suffix in OPTION_KEYS.items()}
    found: dict[str, Any] = {}
    for key, value in raw.items():
        name = by_yaml_key.get(str(key).strip().lower())
        if name is None:
            raise ConfigurationError(f"unknown key {key!r} in config file {path}")
        found[name] = value
    return _coerce_all(found, source="file")


def load_options(
    *,
    env: Mapping[str, str] | None = None,
    config_file: str | Path | None = None,
    **overrides: Any,
) -> RpcOptions:
    """Resolve options: keyword overrides > environment > YAML file > defaults."""
    environ = os.environ if env is None else env
    file_path = config_file or environ.get(ENV_CONFIG_FILE)

    merged: dict[str, Any] = {}
    if file_path:
        merged.update(options_from_file(Path(file_path)))
    merged.update(options_from_env(environ))
    merged.update(_coerce_all({k: v for k, v in overrides.items() if v is not None}, source="override"))
    return RpcOptions(**merged)

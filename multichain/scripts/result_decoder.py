"""Map raw JSON ``result`` values onto declared result types."""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from typing import Any, Union

import result_models as models
from error_map import DeserializationError, InvalidArgumentError

NoneType = type(None)

FlagKey = tuple[str, Any]


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def type_name(target: Any) -> str:
    if target is Any:
        return "Any"
    if isinstance(target, type) and not typing.get_args(target):
        return target.__name__
    return str(target).replace("typing.", "")


@functools.lru_cache(maxsize=None)
def _record_fields(cls: type) -> tuple[tuple[str, str, Any, bool], ...]:
    hints = typing.get_type_hints(cls)
    out = []
    for f in dataclasses.fields(cls):
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        out.append((f.name, f.metadata.get("key", f.name), hints[f.name], required))
    return tuple(out)


def _decode_record(value: Any, cls: type, path: str) -> Any:
    if not isinstance(value, dict):
        raise DeserializationError(f"expected object for {cls.__name__}, got {_describe(value)}", path=path)
    kwargs: dict[str, Any] = {}
    for name, key, hint, required in _record_fields(cls):
        if key not in value:
            if required:
                raise DeserializationError(f"missing required key '{key}' for {cls.__name__}", path=path)
            continue
        kwargs[name] = decode_value(value[key], hint, path=f"{path}.{key}")
    return cls(**kwargs)


def decode_value(value: Any, target: Any, *, path: str = "result") -> Any:
    if target is Any or target is object:
        return value
    if target is None or target is NoneType:
        if value is not None:
            raise DeserializationError(f"expected null, got {_describe(value)}", path=path)
        return None

    origin = typing.get_origin(target)
    if origin is Union or origin is types.UnionType:
        options = typing.get_args(target)
        if value is None:
            if NoneType in options:
                return None
            raise DeserializationError(f"expected {type_name(target)}, got null", path=path)
        errors: list[str] = []
        for option in options:
            if option is NoneType:
                continue
            try:
                return decode_value(value, option, path=path)
            except DeserializationError as err:
                errors.append(str(err))
        raise DeserializationError(f"no union member of {type_name(target)} matched: {'; '.join(errors)}", path=path)

    if origin is list:
        if not isinstance(value, list):
            raise DeserializationError(f"expected array, got {_describe(value)}", path=path)
        (item_type,) = typing.get_args(target) or (Any,)
        return [decode_value(item, item_type, path=f"{path}[{i}]") for i, item in enumerate(value)]

    if origin is dict:
        if not isinstance(value, dict):
            raise DeserializationError(f"expected object, got {_describe(value)}", path=path)
        args = typing.get_args(target)
        value_type = args[1] if len(args) == 2 else Any
        return {str(k): decode_value(v, value_type, path=f"{path}.{k}") for k, v in value.items()}

    if target is bool:
        if not isinstance(value, bool):
            raise DeserializationError(f"expected boolean, got {_describe(value)}", path=path)
        return value
    if target is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DeserializationError(f"expected integer, got {_describe(value)}", path=path)
        return value
    if target is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DeserializationError(f"expected number, got {_describe(value)}", path=path)
        return float(value)
    if target is str:
        if not isinstance(value, str):
            raise DeserializationError(f"expected string, got {_describe(value)}", path=path)
        return value

    if dataclasses.is_dataclass(target) and isinstance(target, type):
        return _decode_record(value, target, path)

    raise DeserializationError(f"unsupported result type {type_name(target)}", path=path)


# --- flag-selected result schemas ----------------------------------------


def flag_key(flag: Any) -> FlagKey:
    if isinstance(flag, bool):
        return ("bool", flag)
    if isinstance(flag, int):
        return ("int", flag)
    raise InvalidArgumentError(f"format flag must be bool or int, got {type(flag).__name__}")


POLYMORPHIC_RESULTS: dict[str, dict[FlagKey, Any]] = {
    "getblock": {
        ("bool", False): str,
        ("int", 0): str,
        ("bool", True): models.GetBlockVerboseResult,
        ("int", 1): models.GetBlockResultV1,
        ("int", 2): models.GetBlockResultV2,
        ("int", 3): models.GetBlockResultV3,
        ("int", 4): models.GetBlockResultV4,
    },
    "getrawtransaction": {
        ("bool", False): str,
        ("int", 0): str,
        ("bool", True): models.GetRawTransactionResult,
        ("int", 1): models.GetRawTransactionResult,
    },
    "getrawmempool": {
        ("bool", False): list[str],
        ("bool", True): dict[str, models.RawMemPoolEntry],
    },
    "getaddresses": {
        ("bool", False): list[str],
        ("bool", True): list[models.GetAddressesResult],
    },
}


def result_type_for(method: str, flag: Any) -> Any:
    table = POLYMORPHIC_RESULTS.get(method)
    if table is None:
        raise KeyError(f"{method} has no flag-selected result types")
    key = flag_key(flag)
    if key not in table:
        allowed = ", ".join(repr(v) for _, v in table)
        raise InvalidArgumentError(f"{method}: unsupported format flag {flag!r} (expected one of {allowed})")
    return table[key]


def check_result_type(method: str, flag: Any, requested: Any) -> Any:
    bound = result_type_for(method, flag)
    if requested != bound:
        raise DeserializationError(
            f"{method} with flag {flag!r} returns {type_name(bound)}, not {type_name(requested)}",
            path="result",
        )
    return bound


def to_json(value: Any) -> Any:
    """Inverse of ``decode_value``: records back to plain JSON with node keys."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for name, key, _hint, _required in _record_fields(type(value)):
            out[key] = to_json(getattr(value, name))
        return out
    if isinstance(value, list):
        return [to_json(item) for item in value]
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    return value

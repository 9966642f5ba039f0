"""Dataclass driven JSON codec.

Entities are frozen dataclasses whose annotations describe the JSON shape:

* ``Index[Node]`` decodes from a non-negative integer,
* ``Tuple[X, ...]`` from an array, ``Tuple[float, float, float]`` from an
  array of exactly three numbers,
* ``Dict[str, X]`` from an object (stored as a read-only mapping),
* ``Optional[X]`` from an absent key or ``null``,
* ``TokenEnum`` / ``CodeEnum`` subclasses through their table codecs,
* other registered entities recursively.

Field names map to JSON keys through :func:`json_field`. Unknown keys are
rejected except inside ``extensions``/``extras`` slots, whose payload class
is picked by the active capabilities (see :mod:`gltfdoc.capabilities`).
"""

from __future__ import annotations

import collections.abc
import copy
import dataclasses
import enum
import functools
import sys
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type

from .capabilities import Extensions, Extras, NoExtensions, NoExtras
from .errors import (
    E_MISSING_FIELD,
    E_TYPE,
    E_UNKNOWN_FIELD,
    E_VALUE_RANGE,
    decode_error,
)
from .index import Index, index_kind

_REGISTRY: Dict[str, type] = {}

EXTENSIONS = "extensions"
EXTRAS = "extras"


@dataclass(frozen=True, slots=True)
class DecodeContext:
    extensions: Type[Extensions] = NoExtensions
    extras: Type[Extras] = NoExtras
    # set while decoding inside an extensions/extras slot
    in_slot: bool = False

    def payload(self, capability: str, slot: str) -> type:
        cap = self.extensions if capability == EXTENSIONS else self.extras
        return cap.payload(slot)


# Field helpers ---------------------------------------------------------------


def json_field(
    name: Optional[str] = None,
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    emit_default: bool = False,
) -> Any:
    """Dataclass field stored under the JSON key ``name``."""
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={"json": name, "emit_default": emit_default},
    )


def _slot_field(capability: str, slot: str) -> Any:
    return dataclasses.field(
        default=None,
        metadata={"json": capability, "capability": capability, "slot": slot},
    )


def extensions_field(slot: str) -> Any:
    return _slot_field(EXTENSIONS, slot)


def extras_field(slot: str) -> Any:
    return _slot_field(EXTRAS, slot)


def internal_field(**kwargs: Any) -> Any:
    """Field that is never read from nor written to JSON."""
    return dataclasses.field(metadata={"internal": True}, **kwargs)


def entity(
    slot: Optional[str] = None, *, scoped: Optional[Mapping[type, str]] = None
) -> Callable[[type], type]:
    """Register a dataclass as a decodable glTF entity.

    ``scoped`` maps an entity kind to the attribute of this entity that holds
    it, for indices that address a collection local to the entity (a channel
    addressing its animation's samplers) instead of one owned by the root.
    """

    def wrap(cls: type) -> type:
        cls.__gltf_slot__ = slot  # type: ignore[attr-defined]
        cls.__gltf_scoped__ = dict(scoped or {})  # type: ignore[attr-defined]
        _REGISTRY[cls.__name__] = cls
        return cls

    return wrap


def entity_slot(cls: type) -> Optional[str]:
    return getattr(cls, "__gltf_slot__", None)


def scoped_kinds(cls: type) -> Dict[type, str]:
    return getattr(cls, "__gltf_scoped__", {})


def json_name(f: dataclasses.Field) -> Optional[str]:
    if f.metadata.get("internal"):
        return None
    return f.metadata.get("json") or f.name


@functools.lru_cache(maxsize=None)
def type_hints(cls: type) -> Dict[str, Any]:
    # forward references between schema modules resolve through the registry
    module = sys.modules[cls.__module__]
    return typing.get_type_hints(
        cls, globalns=dict(vars(module)), localns=dict(_REGISTRY)
    )


def _has_default(f: dataclasses.Field) -> bool:
    return (
        f.default is not dataclasses.MISSING
        or f.default_factory is not dataclasses.MISSING  # type: ignore[misc]
    )


def default_of(f: dataclasses.Field) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
        return f.default_factory()  # type: ignore[misc]
    return dataclasses.MISSING


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


# Decoding --------------------------------------------------------------------


def decode_fields(
    cls: type,
    raw: Any,
    ctx: DecodeContext,
    path: str = "",
    *,
    open_namespace: bool = False,
) -> Dict[str, Any]:
    """Decode ``raw`` into constructor keyword arguments for ``cls``."""
    if not isinstance(raw, dict):
        raise decode_error(
            E_TYPE,
            f"{cls.__name__} must be a JSON object, got {type(raw).__name__}",
            path,
        )
    hints = type_hints(cls)
    known = set()
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        key = json_name(f)
        if key is None:
            continue
        known.add(key)
        fpath = _join(path, key)
        if "capability" in f.metadata:
            value = raw.get(key)
            if value is None:
                kwargs[f.name] = None
            else:
                payload = ctx.payload(f.metadata["capability"], f.metadata["slot"])
                kwargs[f.name] = decode_payload(payload, value, ctx, fpath)
            continue
        if key not in raw:
            if not _has_default(f):
                raise decode_error(
                    E_MISSING_FIELD,
                    f"missing required field '{key}' in {cls.__name__}",
                    fpath,
                )
            continue
        kwargs[f.name] = decode_value(hints[f.name], raw[key], ctx, fpath)
    if not open_namespace:
        unknown = sorted((k for k in raw if k not in known), key=str)
        if unknown:
            raise decode_error(
                E_UNKNOWN_FIELD,
                f"unknown field '{unknown[0]}' in {cls.__name__}",
                _join(path, unknown[0]),
                unknown=unknown,
            )
    return kwargs


def decode_entity(
    cls: type,
    raw: Any,
    ctx: DecodeContext,
    path: str = "",
    *,
    open_namespace: bool = False,
) -> Any:
    return cls(**decode_fields(cls, raw, ctx, path, open_namespace=open_namespace))


def decode_payload(payload: type, raw: Any, ctx: DecodeContext, path: str) -> Any:
    hook = getattr(payload, "decode_payload", None)
    if hook is not None:
        return hook(raw, path)
    if dataclasses.is_dataclass(payload):
        inner = dataclasses.replace(ctx, in_slot=True)
        return decode_entity(payload, raw, inner, path, open_namespace=True)
    raise TypeError(f"unsupported capability payload type: {payload!r}")


def decode_value(hint: Any, raw: Any, ctx: DecodeContext, path: str) -> Any:
    if hint is Any:
        return copy.deepcopy(raw)
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        if raw is None:
            return None
        inner = [a for a in typing.get_args(hint) if a is not type(None)]
        return decode_value(inner[0], raw, ctx, path)
    if origin is Index:
        return Index.decode(index_kind(hint), raw, path)
    if origin is tuple:
        return _decode_tuple(hint, raw, ctx, path)
    if origin in (dict, collections.abc.Mapping):
        if not isinstance(raw, dict):
            raise decode_error(E_TYPE, "expected a JSON object", path)
        _, value_hint = typing.get_args(hint)
        return types.MappingProxyType(
            {
                k: decode_value(value_hint, v, ctx, _join(path, k))
                for k, v in raw.items()
            }
        )
    if isinstance(hint, type):
        if issubclass(hint, enum.Enum):
            return hint.decode(raw, path)  # type: ignore[attr-defined]
        if hint is bool:
            if not isinstance(raw, bool):
                raise decode_error(E_TYPE, f"expected a boolean, got {raw!r}", path)
            return raw
        if hint is int:
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise decode_error(E_TYPE, f"expected an integer, got {raw!r}", path)
            return raw
        if hint is float:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise decode_error(E_TYPE, f"expected a number, got {raw!r}", path)
            return float(raw)
        if hint is str:
            if not isinstance(raw, str):
                raise decode_error(E_TYPE, f"expected a string, got {raw!r}", path)
            return raw
        if dataclasses.is_dataclass(hint):
            return decode_entity(hint, raw, ctx, path, open_namespace=ctx.in_slot)
    raise TypeError(f"no decoder for annotation {hint!r} at {path}")


def _decode_tuple(hint: Any, raw: Any, ctx: DecodeContext, path: str) -> Tuple[Any, ...]:
    if not isinstance(raw, list):
        raise decode_error(
            E_TYPE, f"expected a JSON array, got {type(raw).__name__}", path
        )
    args = typing.get_args(hint)
    if len(args) == 2 and args[1] is Ellipsis:
        return tuple(
            decode_value(args[0], item, ctx, f"{path}[{i}]")
            for i, item in enumerate(raw)
        )
    if len(raw) != len(args):
        raise decode_error(
            E_VALUE_RANGE,
            f"expected an array of {len(args)} items, got {len(raw)}",
            path,
        )
    return tuple(
        decode_value(a, item, ctx, f"{path}[{i}]")
        for i, (a, item) in enumerate(zip(args, raw))
    )


# Encoding --------------------------------------------------------------------


def encode_entity(obj: Any) -> Dict[str, Any]:
    """Encode a dataclass entity; values equal to their default are omitted."""
    out: Dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        key = json_name(f)
        if key is None:
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        if not f.metadata.get("emit_default") and _has_default(f):
            if value == default_of(f):
                continue
        out[key] = encode_value(value)
    return out


def encode_value(value: Any) -> Any:
    if isinstance(value, Index):
        return value.encode()
    if isinstance(value, enum.Enum):
        return value.encode()  # type: ignore[attr-defined]
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (tuple, list)):
        return [encode_value(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return encode_entity(value)
    encode = getattr(value, "encode", None)
    if encode is not None:
        return encode()
    if isinstance(value, Mapping):
        return {k: encode_value(v) for k, v in value.items()}
    raise TypeError(f"cannot encode {type(value).__name__}")


__all__ = [
    "DecodeContext",
    "json_field",
    "extensions_field",
    "extras_field",
    "internal_field",
    "entity",
    "entity_slot",
    "scoped_kinds",
    "json_name",
    "type_hints",
    "default_of",
    "decode_fields",
    "decode_entity",
    "decode_payload",
    "decode_value",
    "encode_entity",
    "encode_value",
]

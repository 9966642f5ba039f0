"""Extension and extras capabilities.

Every extensible entity has an ``extensions`` and an ``extras`` slot. What
gets decoded into those slots is not fixed by the entity: it is chosen by
the two capability classes handed to :meth:`Root.from_str`, one for
``extensions`` and one for ``extras``. A capability names one payload class
per slot; anything it leaves unset falls back to its ``default``.

The defaults (:class:`NoExtensions`, :class:`NoExtras`) decode every slot to
:class:`Empty`, which accepts any JSON object and keeps nothing. Callers
that want typed vendor data subclass a capability::

    @dataclass(frozen=True)
    class EmissiveStrength:
        emissiveStrength: float = 1.0

    @dataclass(frozen=True)
    class MaterialExtensions:
        KHR_materials_emissive_strength: Optional[EmissiveStrength] = None

    class MyExtensions(NoExtensions):
        material = MaterialExtensions

Payload dataclasses, and the dataclasses nested inside them, are decoded as
an open namespace: keys they do not declare are ignored.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Type

from .errors import E_TYPE, decode_error

SLOTS = (
    "accessor",
    "accessor_sparse",
    "accessor_sparse_indices",
    "accessor_sparse_values",
    "animation",
    "animation_channel",
    "animation_channel_target",
    "animation_sampler",
    "asset",
    "buffer",
    "buffer_view",
    "camera",
    "camera_orthographic",
    "camera_perspective",
    "image",
    "material",
    "material_pbr_metallic_roughness",
    "normal_texture_info",
    "occlusion_texture_info",
    "texture_info",
    "mesh",
    "primitive",
    "node",
    "sampler",
    "scene",
    "skin",
    "texture",
    "root",
)


@dataclass(frozen=True, slots=True)
class Empty:
    """Zero-size payload; decodes from any JSON object, encodes to ``{}``."""


class RawObject(Mapping[str, Any]):
    """Read-only copy of an untyped JSON object."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(dict(data))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RawObject):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RawObject({self._data!r})"

    @classmethod
    def decode_payload(cls, raw: Any, path: str = "") -> "RawObject":
        if not isinstance(raw, dict):
            raise decode_error(E_TYPE, "expected a JSON object", path)
        return cls(raw)

    def encode(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)


class Capability:
    """Base of both capability axes; maps a slot name to a payload class."""

    default: Type[Any] = Empty

    @classmethod
    def payload(cls, slot: str) -> Type[Any]:
        if slot not in SLOTS:
            raise KeyError(f"unknown extensible slot '{slot}'")
        chosen: Optional[Type[Any]] = getattr(cls, slot, None)
        return chosen if chosen is not None else cls.default

    @classmethod
    def describe(cls) -> Dict[str, str]:
        return {slot: cls.payload(slot).__name__ for slot in SLOTS}


class Extensions(Capability):
    """Capability for ``extensions`` slots (official and vendor schemas)."""


class Extras(Capability):
    """Capability for ``extras`` slots (application data)."""


class NoExtensions(Extensions):
    pass


class NoExtras(Extras):
    pass


class RawExtensions(Extensions):
    default = RawObject


class RawExtras(Extras):
    default = RawObject


__all__ = [
    "SLOTS",
    "Empty",
    "RawObject",
    "Capability",
    "Extensions",
    "Extras",
    "NoExtensions",
    "NoExtras",
    "RawExtensions",
    "RawExtras",
]

"""Meshes and their primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import Mode
from ..index import Index

if TYPE_CHECKING:  # pragma: no cover
    from .accessor import Accessor
    from .material import Material


@entity("primitive")
@dataclass(frozen=True, slots=True)
class Primitive:
    # semantic name (POSITION, NORMAL, TEXCOORD_0, ...) -> accessor
    attributes: Dict[str, Index[Accessor]] = json_field()
    indices: Optional[Index[Accessor]] = json_field(default=None)
    material: Optional[Index[Material]] = json_field(default=None)
    mode: Mode = json_field(default=Mode.TRIANGLES)
    targets: Optional[Tuple[Dict[str, Index[Accessor]], ...]] = json_field(
        default=None
    )
    extensions: Optional[Any] = extensions_field("primitive")
    extras: Optional[Any] = extras_field("primitive")

    def get(self, semantic: str) -> Optional[Index[Accessor]]:
        return self.attributes.get(semantic)


@entity("mesh")
@dataclass(frozen=True, slots=True)
class Mesh:
    primitives: Tuple[Primitive, ...] = json_field()
    weights: Optional[Tuple[float, ...]] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("mesh")
    extras: Optional[Any] = extras_field("mesh")


__all__ = ["Mesh", "Primitive"]

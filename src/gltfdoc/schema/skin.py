"""Joints and matrices defining a skin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..codec import entity, extensions_field, extras_field, json_field
from ..index import Index

if TYPE_CHECKING:  # pragma: no cover
    from .accessor import Accessor
    from .scene import Node


@entity("skin")
@dataclass(frozen=True, slots=True)
class Skin:
    joints: Tuple[Index[Node], ...] = json_field()
    # 4x4 inverse-bind matrices; identity when absent
    inverse_bind_matrices: Optional[Index[Accessor]] = json_field(
        "inverseBindMatrices", default=None
    )
    skeleton: Optional[Index[Node]] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("skin")
    extras: Optional[Any] = extras_field("skin")


__all__ = ["Skin"]

"""Scene graph: nodes and scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..codec import entity, extensions_field, extras_field, json_field
from ..index import Index

if TYPE_CHECKING:  # pragma: no cover
    from .camera import Camera
    from .mesh import Mesh
    from .skin import Skin


@entity("node")
@dataclass(frozen=True, slots=True)
class Node:
    """A node in the node hierarchy.

    The local transform is either ``matrix`` or any combination of
    ``translation``/``rotation``/``scale``; absent components keep their
    glTF defaults and are left as ``None`` here.
    """

    camera: Optional[Index[Camera]] = json_field(default=None)
    children: Tuple[Index[Node], ...] = json_field(default=())
    skin: Optional[Index[Skin]] = json_field(default=None)
    matrix: Optional[Tuple[float, ...]] = json_field(default=None)
    mesh: Optional[Index[Mesh]] = json_field(default=None)
    rotation: Optional[Tuple[float, float, float, float]] = json_field(
        default=None
    )
    scale: Optional[Tuple[float, float, float]] = json_field(default=None)
    translation: Optional[Tuple[float, float, float]] = json_field(
        default=None
    )
    weights: Optional[Tuple[float, ...]] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("node")
    extras: Optional[Any] = extras_field("node")


@entity("scene")
@dataclass(frozen=True, slots=True)
class Scene:
    nodes: Tuple[Index[Node], ...] = json_field(default=())
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("scene")
    extras: Optional[Any] = extras_field("scene")


__all__ = ["Node", "Scene"]

"""Camera projections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import CameraType


@entity("camera_orthographic")
@dataclass(frozen=True, slots=True)
class Orthographic:
    xmag: float = json_field()
    ymag: float = json_field()
    zfar: float = json_field()
    znear: float = json_field()
    extensions: Optional[Any] = extensions_field("camera_orthographic")
    extras: Optional[Any] = extras_field("camera_orthographic")


@entity("camera_perspective")
@dataclass(frozen=True, slots=True)
class Perspective:
    yfov: float = json_field()
    znear: float = json_field()
    aspect_ratio: Optional[float] = json_field("aspectRatio", default=None)
    # absent means an infinite projection
    zfar: Optional[float] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("camera_perspective")
    extras: Optional[Any] = extras_field("camera_perspective")


@entity("camera")
@dataclass(frozen=True, slots=True)
class Camera:
    type: CameraType = json_field()
    orthographic: Optional[Orthographic] = json_field(default=None)
    perspective: Optional[Perspective] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("camera")
    extras: Optional[Any] = extras_field("camera")


__all__ = ["Camera", "Orthographic", "Perspective"]

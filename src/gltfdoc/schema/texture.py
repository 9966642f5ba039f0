"""Images, samplers and textures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import MagFilter, MinFilter, WrappingMode
from ..index import Index

if TYPE_CHECKING:  # pragma: no cover
    from .buffer import View


@entity("image")
@dataclass(frozen=True, slots=True)
class Image:
    """Image data, either by ``uri`` or embedded in a buffer view."""

    uri: Optional[str] = json_field(default=None)
    mime_type: Optional[str] = json_field("mimeType", default=None)
    buffer_view: Optional[Index[View]] = json_field("bufferView", default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("image")
    extras: Optional[Any] = extras_field("image")


@entity("sampler")
@dataclass(frozen=True, slots=True)
class Sampler:
    mag_filter: Optional[MagFilter] = json_field("magFilter", default=None)
    min_filter: Optional[MinFilter] = json_field("minFilter", default=None)
    wrap_s: WrappingMode = json_field("wrapS", default=WrappingMode.REPEAT)
    wrap_t: WrappingMode = json_field("wrapT", default=WrappingMode.REPEAT)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("sampler")
    extras: Optional[Any] = extras_field("sampler")


@entity("texture")
@dataclass(frozen=True, slots=True)
class Texture:
    sampler: Optional[Index[Sampler]] = json_field(default=None)
    source: Optional[Index[Image]] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("texture")
    extras: Optional[Any] = extras_field("texture")


@entity("texture_info")
@dataclass(frozen=True, slots=True)
class Info:
    """Reference from a material to a texture."""

    index: Index[Texture] = json_field()
    tex_coord: int = json_field("texCoord", default=0)
    extensions: Optional[Any] = extensions_field("texture_info")
    extras: Optional[Any] = extras_field("texture_info")


__all__ = ["Image", "Sampler", "Texture", "Info"]

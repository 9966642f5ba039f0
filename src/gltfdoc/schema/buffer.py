"""Buffers and buffer views.

Only the byte-range metadata is modelled; payloads are never loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import Target
from ..index import Index


@entity("buffer")
@dataclass(frozen=True, slots=True)
class Buffer:
    byte_length: int = json_field("byteLength")
    uri: Optional[str] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("buffer")
    extras: Optional[Any] = extras_field("buffer")


@entity("buffer_view")
@dataclass(frozen=True, slots=True)
class View:
    buffer: Index[Buffer] = json_field()
    byte_length: int = json_field("byteLength")
    byte_offset: int = json_field("byteOffset", default=0)
    byte_stride: Optional[int] = json_field("byteStride", default=None)
    target: Optional[Target] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("buffer_view")
    extras: Optional[Any] = extras_field("buffer_view")


__all__ = ["Buffer", "View"]

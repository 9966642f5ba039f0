"""Asset metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..codec import entity, extensions_field, extras_field, json_field


@entity("asset")
@dataclass(frozen=True, slots=True)
class Asset:
    # absent version is read as 2.0 but always written back out
    version: str = json_field(default="2.0", emit_default=True)
    min_version: Optional[str] = json_field("minVersion", default=None)
    copyright: Optional[str] = json_field(default=None)
    generator: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("asset")
    extras: Optional[Any] = extras_field("asset")


__all__ = ["Asset"]

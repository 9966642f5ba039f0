"""Keyframe animations.

A channel's ``sampler`` addresses the samplers of its own animation, not a
root collection; :func:`gltfdoc.codec.entity` records that scope so the
validator checks it against ``Animation.samplers``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import Interpolation, TargetPath
from ..errors import E_INDEX_KIND, E_INDEX_OUT_OF_RANGE, IndexLookupError
from ..index import Index

if TYPE_CHECKING:  # pragma: no cover
    from .accessor import Accessor
    from .scene import Node


@entity("animation_sampler")
@dataclass(frozen=True, slots=True)
class AnimationSampler:
    input: Index[Accessor] = json_field()
    output: Index[Accessor] = json_field()
    interpolation: Interpolation = json_field(default=Interpolation.LINEAR)
    extensions: Optional[Any] = extensions_field("animation_sampler")
    extras: Optional[Any] = extras_field("animation_sampler")


@entity("animation_channel_target")
@dataclass(frozen=True, slots=True)
class ChannelTarget:
    path: TargetPath = json_field()
    node: Optional[Index[Node]] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("animation_channel_target")
    extras: Optional[Any] = extras_field("animation_channel_target")


@entity("animation_channel")
@dataclass(frozen=True, slots=True)
class Channel:
    sampler: Index[AnimationSampler] = json_field()
    target: ChannelTarget = json_field()
    extensions: Optional[Any] = extensions_field("animation_channel")
    extras: Optional[Any] = extras_field("animation_channel")


@entity("animation", scoped={AnimationSampler: "samplers"})
@dataclass(frozen=True, slots=True)
class Animation:
    channels: Tuple[Channel, ...] = json_field()
    samplers: Tuple[AnimationSampler, ...] = json_field()
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("animation")
    extras: Optional[Any] = extras_field("animation")

    def sampler(self, index: Index[AnimationSampler]) -> AnimationSampler:
        if index.kind is not AnimationSampler:
            raise IndexLookupError(
                code=E_INDEX_KIND,
                message=f"{index!r} does not address animation samplers",
            )
        if index.value >= len(self.samplers):
            raise IndexLookupError(
                code=E_INDEX_OUT_OF_RANGE,
                message=f"{index!r} out of range ({len(self.samplers)} samplers)",
            )
        return self.samplers[index.value]


__all__ = ["Animation", "AnimationSampler", "Channel", "ChannelTarget"]

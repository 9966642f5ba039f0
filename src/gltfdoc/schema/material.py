"""Materials (metallic-roughness model)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import AlphaMode
from ..index import Index
from .texture import Info

if TYPE_CHECKING:  # pragma: no cover
    from .texture import Texture


@entity("material_pbr_metallic_roughness")
@dataclass(frozen=True, slots=True)
class PbrMetallicRoughness:
    base_color_factor: Tuple[float, float, float, float] = json_field(
        "baseColorFactor", default=(1.0, 1.0, 1.0, 1.0)
    )
    base_color_texture: Optional[Info] = json_field(
        "baseColorTexture", default=None
    )
    metallic_factor: float = json_field("metallicFactor", default=1.0)
    roughness_factor: float = json_field("roughnessFactor", default=1.0)
    metallic_roughness_texture: Optional[Info] = json_field(
        "metallicRoughnessTexture", default=None
    )
    extensions: Optional[Any] = extensions_field(
        "material_pbr_metallic_roughness"
    )
    extras: Optional[Any] = extras_field("material_pbr_metallic_roughness")


@entity("normal_texture_info")
@dataclass(frozen=True, slots=True)
class NormalTexture:
    index: Index[Texture] = json_field()
    scale: float = json_field(default=1.0)
    tex_coord: int = json_field("texCoord", default=0)
    extensions: Optional[Any] = extensions_field("normal_texture_info")
    extras: Optional[Any] = extras_field("normal_texture_info")


@entity("occlusion_texture_info")
@dataclass(frozen=True, slots=True)
class OcclusionTexture:
    index: Index[Texture] = json_field()
    strength: float = json_field(default=1.0)
    tex_coord: int = json_field("texCoord", default=0)
    extensions: Optional[Any] = extensions_field("occlusion_texture_info")
    extras: Optional[Any] = extras_field("occlusion_texture_info")


@entity("material")
@dataclass(frozen=True, slots=True)
class Material:
    pbr_metallic_roughness: Optional[PbrMetallicRoughness] = json_field(
        "pbrMetallicRoughness", default=None
    )
    normal_texture: Optional[NormalTexture] = json_field(
        "normalTexture", default=None
    )
    occlusion_texture: Optional[OcclusionTexture] = json_field(
        "occlusionTexture", default=None
    )
    emissive_texture: Optional[Info] = json_field(
        "emissiveTexture", default=None
    )
    emissive_factor: Tuple[float, float, float] = json_field(
        "emissiveFactor", default=(0.0, 0.0, 0.0)
    )
    alpha_mode: AlphaMode = json_field("alphaMode", default=AlphaMode.OPAQUE)
    alpha_cutoff: float = json_field("alphaCutoff", default=0.5)
    double_sided: bool = json_field("doubleSided", default=False)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("material")
    extras: Optional[Any] = extras_field("material")


__all__ = [
    "Material",
    "PbrMetallicRoughness",
    "NormalTexture",
    "OcclusionTexture",
]

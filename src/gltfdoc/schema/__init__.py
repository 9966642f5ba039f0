"""Field sets of every glTF entity kind."""

from .accessor import Accessor, Sparse, SparseIndices, SparseValues
from .animation import Animation, AnimationSampler, Channel, ChannelTarget
from .asset import Asset
from .buffer import Buffer, View
from .camera import Camera, Orthographic, Perspective
from .material import (
    Material,
    NormalTexture,
    OcclusionTexture,
    PbrMetallicRoughness,
)
from .mesh import Mesh, Primitive
from .scene import Node, Scene
from .skin import Skin
from .texture import Image, Info, Sampler, Texture

__all__ = [
    "Accessor",
    "Sparse",
    "SparseIndices",
    "SparseValues",
    "Animation",
    "AnimationSampler",
    "Channel",
    "ChannelTarget",
    "Asset",
    "Buffer",
    "View",
    "Camera",
    "Orthographic",
    "Perspective",
    "Material",
    "NormalTexture",
    "OcclusionTexture",
    "PbrMetallicRoughness",
    "Mesh",
    "Primitive",
    "Node",
    "Scene",
    "Skin",
    "Image",
    "Info",
    "Sampler",
    "Texture",
]

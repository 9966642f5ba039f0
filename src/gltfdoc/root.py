"""The glTF document root.

:class:`Root` owns one ordered tuple per entity kind and is the only place
:class:`~gltfdoc.index.Index` values are dereferenced. It is built in one
shot by :meth:`Root.from_str` / :meth:`Root.from_dict`, which decode the
whole document and then run the graph validator; a root that exists has no
dangling references.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Generic,
    Iterator,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from .capabilities import Extensions, Extras, NoExtensions, NoExtras
from .codec import (
    DecodeContext,
    decode_fields,
    encode_entity,
    extensions_field,
    extras_field,
    internal_field,
    json_field,
)
from .errors import (
    E_INDEX_KIND,
    E_INDEX_OUT_OF_RANGE,
    E_JSON,
    DecodeError,
    IndexLookupError,
    too_deep,
)
from .index import Index
from .logging import get_logger
from .schema import (
    Accessor,
    Animation,
    Asset,
    Buffer,
    Camera,
    Image,
    Material,
    Mesh,
    Node,
    Sampler,
    Scene,
    Skin,
    Texture,
    View,
)
from .validator import IndexSite, iter_index_sites, validate_root

E = TypeVar("E", bound=Extensions)
X = TypeVar("X", bound=Extras)
T = TypeVar("T")

# entity kind -> attribute of Root holding its collection
COLLECTIONS: Dict[type, str] = {
    Accessor: "accessors",
    Animation: "animations",
    Buffer: "buffers",
    View: "buffer_views",
    Camera: "cameras",
    Image: "images",
    Material: "materials",
    Mesh: "meshes",
    Node: "nodes",
    Sampler: "samplers",
    Scene: "scenes",
    Skin: "skins",
    Texture: "textures",
}


def _default_scene() -> Index[Scene]:
    return Index(Scene, 0)


@dataclass(frozen=True, kw_only=True)
class Root(Generic[E, X]):
    asset: Asset = json_field()
    accessors: Tuple[Accessor, ...] = json_field(default=())
    animations: Tuple[Animation, ...] = json_field(default=())
    buffers: Tuple[Buffer, ...] = json_field(default=())
    buffer_views: Tuple[View, ...] = json_field("bufferViews", default=())
    cameras: Tuple[Camera, ...] = json_field(default=())
    images: Tuple[Image, ...] = json_field(default=())
    materials: Tuple[Material, ...] = json_field(default=())
    meshes: Tuple[Mesh, ...] = json_field(default=())
    nodes: Tuple[Node, ...] = json_field(default=())
    samplers: Tuple[Sampler, ...] = json_field(default=())
    default_scene: Index[Scene] = json_field(
        "scene", default_factory=_default_scene
    )
    scenes: Tuple[Scene, ...] = json_field(default=())
    skins: Tuple[Skin, ...] = json_field(default=())
    textures: Tuple[Texture, ...] = json_field(default=())
    extensions_used: Tuple[str, ...] = json_field(
        "extensionsUsed", default=()
    )
    extensions_required: Tuple[str, ...] = json_field(
        "extensionsRequired", default=()
    )
    extensions: Optional[Any] = extensions_field("root")
    extras: Optional[Any] = extras_field("root")

    extensions_capability: Type[Extensions] = internal_field(
        default=NoExtensions
    )
    extras_capability: Type[Extras] = internal_field(default=NoExtras)
    # False when "scene" was absent and default_scene is the implied 0
    explicit_scene: bool = internal_field(default=True)

    # Construction ------------------------------------------------------------
    @classmethod
    def from_str(
        cls,
        text: Union[str, bytes],
        *,
        extensions: Type[Extensions] = NoExtensions,
        extras: Type[Extras] = NoExtras,
    ) -> "Root[Any, Any]":
        """Decode and validate a glTF 2.0 JSON document."""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(
                code=E_JSON,
                message=f"malformed JSON: {e}",
                context={
                    "path": "",
                    "line": getattr(e, "lineno", None),
                    "column": getattr(e, "colno", None),
                },
            ) from e
        except RecursionError as e:
            raise too_deep() from e
        return cls.from_dict(data, extensions=extensions, extras=extras)

    @classmethod
    def from_dict(
        cls,
        data: Any,
        *,
        extensions: Type[Extensions] = NoExtensions,
        extras: Type[Extras] = NoExtras,
    ) -> "Root[Any, Any]":
        """Decode and validate an already parsed JSON document."""
        logger = get_logger()
        ctx = DecodeContext(extensions=extensions, extras=extras)
        try:
            kwargs = decode_fields(cls, data, ctx)
            root = cls(
                **kwargs,
                extensions_capability=extensions,
                extras_capability=extras,
                explicit_scene="scene" in data,
            )
            logger.debug(
                "decoded document: %s",
                " ".join(f"{k}={v}" for k, v in root.counts().items()),
            )
            validate_root(root)
        except RecursionError as e:
            raise too_deep() from e
        return root

    # Encoding ----------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return encode_entity(self)

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    # Lookup ------------------------------------------------------------------
    def collection_lengths(self) -> Dict[type, Tuple[str, int]]:
        return {
            kind: (attr, len(getattr(self, attr)))
            for kind, attr in COLLECTIONS.items()
        }

    def counts(self) -> Dict[str, int]:
        return {attr: len(getattr(self, attr)) for attr in COLLECTIONS.values()}

    def get(self, index: Index[T]) -> T:
        """Return the element ``index`` designates, whatever its kind."""
        attr = COLLECTIONS.get(index.kind)
        if attr is None:
            raise IndexLookupError(
                code=E_INDEX_KIND,
                message=f"{index!r} does not address a root collection",
            )
        items = getattr(self, attr)
        if index.value >= len(items):
            raise IndexLookupError(
                code=E_INDEX_OUT_OF_RANGE,
                message=f"{index!r} out of range ({len(items)} {attr})",
                context={"kind": attr, "value": index.value},
            )
        return items[index.value]

    def _lookup(self, kind: type, index: Index[Any]) -> Any:
        if index.kind is not kind:
            raise IndexLookupError(
                code=E_INDEX_KIND,
                message=f"{index!r} used to address {COLLECTIONS[kind]}",
            )
        return self.get(index)

    def iter_indices(self) -> Iterator[IndexSite]:
        return iter_index_sites(self)

    def active_scene(self) -> Optional[Scene]:
        """The default scene, or None for a document without scenes."""
        if not self.scenes:
            return None
        return self.get(self.default_scene)

    def accessor(self, index: Index[Accessor]) -> Accessor:
        return self._lookup(Accessor, index)

    def animation(self, index: Index[Animation]) -> Animation:
        return self._lookup(Animation, index)

    def buffer(self, index: Index[Buffer]) -> Buffer:
        return self._lookup(Buffer, index)

    def buffer_view(self, index: Index[View]) -> View:
        return self._lookup(View, index)

    def camera(self, index: Index[Camera]) -> Camera:
        return self._lookup(Camera, index)

    def image(self, index: Index[Image]) -> Image:
        return self._lookup(Image, index)

    def material(self, index: Index[Material]) -> Material:
        return self._lookup(Material, index)

    def mesh(self, index: Index[Mesh]) -> Mesh:
        return self._lookup(Mesh, index)

    def node(self, index: Index[Node]) -> Node:
        return self._lookup(Node, index)

    def sampler(self, index: Index[Sampler]) -> Sampler:
        return self._lookup(Sampler, index)

    def scene(self, index: Index[Scene]) -> Scene:
        return self._lookup(Scene, index)

    def skin(self, index: Index[Skin]) -> Skin:
        return self._lookup(Skin, index)

    def texture(self, index: Index[Texture]) -> Texture:
        return self._lookup(Texture, index)


__all__ = ["Root", "COLLECTIONS"]

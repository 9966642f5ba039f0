from __future__ import annotations

import dataclasses
import json

import pytest

from gltfdoc import Index, RawExtras, Root
from gltfdoc.enums import AlphaMode, CameraType, MagFilter, Mode, WrappingMode
from gltfdoc.errors import (
    E_INDEX_KIND,
    E_INDEX_OUT_OF_RANGE,
    E_JSON,
    E_MISSING_FIELD,
    E_TYPE,
    E_UNKNOWN_FIELD,
    E_VALUE_RANGE,
    DecodeError,
    EnumDecodeError,
    IndexLookupError,
)
from gltfdoc.schema import Accessor, Camera, Material, Mesh, Node, Scene

from sample_docs import minimal, one_scene_one_node, skinned, textured_box


def test_one_scene_one_node():  # noqa: N802
    root = Root.from_str(json.dumps(one_scene_one_node()))
    assert root.default_scene == Index(Scene, 0)
    assert len(root.scenes) == 1
    assert root.scenes[0].nodes == (Index(Node, 0),)
    assert len(root.nodes) == 1
    assert root.get(root.scenes[0].nodes[0]) is root.nodes[0]
    assert root.active_scene() is root.scenes[0]


def test_absent_collections_are_empty():  # noqa: N802
    root = Root.from_str(json.dumps(minimal()))
    assert root.cameras == ()
    assert root.nodes == ()
    assert root.extensions_used == ()
    assert root.asset.version == "2.0"
    assert all(count == 0 for count in root.counts().values())


def test_scene_defaults_to_zero_without_scenes():  # noqa: N802
    root = Root.from_dict(minimal())
    assert root.default_scene == Index(Scene, 0)
    assert root.active_scene() is None


def test_asset_version_defaults():  # noqa: N802
    root = Root.from_dict({"asset": {}})
    assert root.asset.version == "2.0"


def test_textured_box_fields():  # noqa: N802
    root = Root.from_dict(textured_box())
    box = root.nodes[1]
    assert box.mesh == Index(Mesh, 0)
    assert box.translation == (0.0, 1.0, 0.0)
    assert box.scale is None
    prim = root.mesh(box.mesh).primitives[0]
    assert prim.mode is Mode.TRIANGLES
    assert prim.attributes["POSITION"] == Index(Accessor, 1)
    assert root.accessor(prim.attributes["POSITION"]).max == (0.5, 0.5, 0.5)
    mat = root.material(prim.material)
    assert mat.alpha_mode is AlphaMode.MASK
    assert mat.alpha_cutoff == 0.5
    assert mat.pbr_metallic_roughness.base_color_factor == (1.0, 1.0, 1.0, 1.0)
    assert mat.pbr_metallic_roughness.metallic_factor == 0.0
    tex = root.get(mat.pbr_metallic_roughness.base_color_texture.index)
    sampler = root.sampler(tex.sampler)
    assert sampler.mag_filter is MagFilter.LINEAR
    assert sampler.wrap_s is WrappingMode.CLAMP_TO_EDGE
    assert sampler.wrap_t is WrappingMode.REPEAT
    assert root.image(tex.source).uri == "box.png"
    cam = root.camera(root.nodes[2].camera)
    assert cam.type is CameraType.PERSPECTIVE
    assert cam.perspective.aspect_ratio is None
    assert root.buffer_views[2].byte_stride == 8


def test_encode_decode_equivalence():  # noqa: N802
    for doc in (one_scene_one_node(), textured_box(), skinned()):
        root = Root.from_dict(doc)
        assert root.to_dict() == doc
        again = Root.from_str(root.to_json())
        assert again == root


def test_encode_omits_defaults_but_keeps_version():  # noqa: N802
    doc = {
        "asset": {"version": "2.0"},
        "scene": 0,
        "scenes": [{}],
        "materials": [{"alphaMode": "OPAQUE", "doubleSided": False}],
    }
    out = Root.from_dict(doc).to_dict()
    assert out == {"asset": {"version": "2.0"}, "scenes": [{}], "materials": [{}]}


def test_null_is_treated_as_absent():  # noqa: N802
    root = Root.from_dict({"asset": {"version": "2.0"}, "nodes": [{"mesh": None}]})
    assert root.nodes[0].mesh is None


def test_root_is_immutable():  # noqa: N802
    root = Root.from_dict(one_scene_one_node())
    with pytest.raises(dataclasses.FrozenInstanceError):
        root.nodes = ()  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        root.nodes[0].mesh = Index(Mesh, 0)  # type: ignore[misc]


class TestLookup:
    def test_get_out_of_range(self):
        root = Root.from_dict(one_scene_one_node())
        with pytest.raises(IndexLookupError) as ei:
            root.get(Index(Node, 5))
        assert ei.value.code == E_INDEX_OUT_OF_RANGE
        assert isinstance(ei.value, LookupError)

    def test_typed_accessor_rejects_other_kind(self):
        root = Root.from_dict(one_scene_one_node())
        with pytest.raises(IndexLookupError) as ei:
            root.mesh(Index(Node, 0))  # type: ignore[arg-type]
        assert ei.value.code == E_INDEX_KIND

    def test_get_rejects_non_root_kind(self):
        root = Root.from_dict(skinned())
        anim = root.animations[0]
        channel = anim.channels[0]
        with pytest.raises(IndexLookupError) as ei:
            root.get(channel.sampler)
        assert ei.value.code == E_INDEX_KIND
        assert anim.sampler(channel.sampler) is anim.samplers[0]

    def test_iter_indices_visits_every_reference(self):
        root = Root.from_dict(one_scene_one_node())
        paths = sorted(site.path for site in root.iter_indices())
        assert paths == ["scene", "scenes[0].nodes[0]"]


class TestDecodeErrors:
    def test_malformed_json(self):
        with pytest.raises(DecodeError) as ei:
            Root.from_str('{"asset": ')
        assert ei.value.code == E_JSON
        assert ei.value.context["line"] == 1

    def test_top_level_must_be_object(self):
        with pytest.raises(DecodeError) as ei:
            Root.from_str("[]")
        assert ei.value.code == E_TYPE

    def test_missing_asset(self):
        with pytest.raises(DecodeError) as ei:
            Root.from_dict({"nodes": []})
        assert ei.value.code == E_MISSING_FIELD
        assert ei.value.path == "asset"

    def test_unknown_top_level_field(self):
        with pytest.raises(DecodeError) as ei:
            Root.from_dict({"asset": {}, "bogus": 1})
        assert ei.value.code == E_UNKNOWN_FIELD
        assert ei.value.path == "bogus"

    def test_unknown_nested_field(self):
        doc = {"asset": {}, "nodes": [{"meshh": 0}]}
        with pytest.raises(DecodeError) as ei:
            Root.from_dict(doc)
        assert ei.value.code == E_UNKNOWN_FIELD
        assert ei.value.path == "nodes[0].meshh"

    def test_missing_required_nested_field(self):
        doc = {"asset": {}, "accessors": [{"count": 1, "type": "SCALAR"}]}
        with pytest.raises(DecodeError) as ei:
            Root.from_dict(doc)
        assert ei.value.code == E_MISSING_FIELD
        assert ei.value.path == "accessors[0].componentType"

    def test_negative_index(self):
        with pytest.raises(DecodeError) as ei:
            Root.from_dict({"asset": {}, "nodes": [{"mesh": -1}]})
        assert ei.value.code == E_VALUE_RANGE
        assert ei.value.path == "nodes[0].mesh"

    def test_fixed_length_vector(self):
        doc = {"asset": {}, "nodes": [{"translation": [0, 1]}]}
        with pytest.raises(DecodeError) as ei:
            Root.from_dict(doc)
        assert ei.value.code == E_VALUE_RANGE
        assert ei.value.path == "nodes[0].translation"

    def test_unknown_enum_token_in_document(self):
        doc = {"asset": {}, "materials": [{"alphaMode": "SHINY"}]}
        with pytest.raises(EnumDecodeError) as ei:
            Root.from_dict(doc)
        assert ei.value.value == "SHINY"
        assert ei.value.path == "materials[0].alphaMode"

    def test_unknown_enum_code_in_document(self):
        doc = {"asset": {}, "samplers": [{"magFilter": 1234}]}
        with pytest.raises(EnumDecodeError) as ei:
            Root.from_dict(doc)
        assert ei.value.value == 1234
        assert 9728 in ei.value.accepted

    def test_camera_type_is_required(self):
        doc = {"asset": {}, "cameras": [{"perspective": {"yfov": 1, "znear": 1}}]}
        with pytest.raises(DecodeError) as ei:
            Root.from_dict(doc)
        assert ei.value.path == "cameras[0].type"


def test_decoded_entities_are_the_expected_types():  # noqa: N802
    root = Root.from_dict(textured_box())
    assert isinstance(root.cameras[0], Camera)
    assert isinstance(root.materials[0], Material)
    assert isinstance(root.scenes[0], Scene)


class TestNestingDepth:
    def test_deep_json_text(self):
        text = (
            '{"asset": {"version": "2.0"}, "extras": '
            + "[" * 200000
            + "]" * 200000
            + "}"
        )
        with pytest.raises(DecodeError) as ei:
            Root.from_str(text)
        assert ei.value.code == E_JSON
        assert "nested too deeply" in ei.value.message

    def test_deep_parsed_document(self):
        deep: list = []
        for _ in range(50000):
            deep = [deep]
        doc = {"asset": {"version": "2.0"}, "extras": {"deep": deep}}
        with pytest.raises(DecodeError) as ei:
            Root.from_dict(doc, extras=RawExtras)
        assert ei.value.code == E_JSON

from __future__ import annotations

import json

import pytest
import yaml

from gltfdoc import check, load
from gltfdoc.errors import E_FILE, E_JSON, DecodeError, LoadError
from gltfdoc.loader import read_document
from gltfdoc.schema import Node

from sample_docs import one_scene_one_node, textured_box


def test_load_gltf_json(tmp_path):  # noqa: N802
    p = tmp_path / "box.gltf"
    p.write_text(json.dumps(textured_box()), encoding="utf-8")
    root = load(p)
    assert root.counts()["nodes"] == 3
    assert root.to_dict() == textured_box()


def test_load_yaml(tmp_path):  # noqa: N802
    p = tmp_path / "scene.yaml"
    p.write_text(yaml.safe_dump(one_scene_one_node()), encoding="utf-8")
    root = load(p)
    assert len(root.nodes) == 1
    assert isinstance(root.nodes[0], Node)


def test_utf8_bom_is_accepted(tmp_path):  # noqa: N802
    p = tmp_path / "bom.gltf"
    p.write_bytes(b"\xef\xbb\xbf" + json.dumps(one_scene_one_node()).encode())
    assert read_document(p) == one_scene_one_node()


def test_missing_file(tmp_path):  # noqa: N802
    with pytest.raises(LoadError) as ei:
        load(tmp_path / "nope.gltf")
    assert ei.value.code == E_FILE


def test_glb_is_rejected(tmp_path):  # noqa: N802
    p = tmp_path / "model.glb"
    p.write_bytes(b"glTF")
    with pytest.raises(LoadError) as ei:
        load(p)
    assert "glb" in ei.value.message


def test_malformed_file(tmp_path):  # noqa: N802
    p = tmp_path / "bad.gltf"
    p.write_text('{"asset": {', encoding="utf-8")
    with pytest.raises(DecodeError) as ei:
        load(p)
    assert ei.value.code == E_JSON
    bad_yaml = tmp_path / "bad.yml"
    bad_yaml.write_text("asset: [unclosed", encoding="utf-8")
    with pytest.raises(DecodeError):
        load(bad_yaml)


class TestCheck:
    def test_ok(self, tmp_path):
        p = tmp_path / "ok.gltf"
        p.write_text(json.dumps(one_scene_one_node()), encoding="utf-8")
        result = check(p)
        assert result.ok
        assert result.root is not None
        assert result.to_dict()["counts"]["nodes"] == 1

    def test_invalid_graph_collects_violations(self, tmp_path):
        doc = one_scene_one_node()
        doc["scenes"][0]["nodes"] = [0, 4, 5]
        p = tmp_path / "broken.gltf"
        p.write_text(json.dumps(doc), encoding="utf-8")
        result = check(p)
        assert not result.ok
        assert result.root is None
        assert [v.path for v in result.violations] == [
            "scenes[0].nodes[1]",
            "scenes[0].nodes[2]",
        ]
        assert result.to_dict()["error"]["code"] == "E_INDEX_OUT_OF_RANGE"

    def test_decode_error(self, tmp_path):
        p = tmp_path / "decode.gltf"
        p.write_text('{"asset": {}, "nodes": [{"mesh": "a"}]}', encoding="utf-8")
        result = check(p)
        assert not result.ok
        assert result.violations == []
        assert result.error.path == "nodes[0].mesh"


def test_invalid_utf8_is_a_decode_error(tmp_path):  # noqa: N802
    p = tmp_path / "latin.gltf"
    p.write_bytes(b'{"asset": {"version": "\xff\xfe"}}')
    with pytest.raises(DecodeError) as ei:
        load(p)
    assert ei.value.code == E_JSON
    assert "UTF-8" in ei.value.message


def test_unreadable_path_is_a_load_error(tmp_path):  # noqa: N802
    d = tmp_path / "folder.gltf"
    d.mkdir()
    with pytest.raises(LoadError) as ei:
        load(d)
    assert ei.value.code == E_FILE


def test_deeply_nested_file(tmp_path):  # noqa: N802
    p = tmp_path / "deep.gltf"
    p.write_text('{"asset": {}, "extras": ' + "[" * 200000 + "]" * 200000 + "}")
    with pytest.raises(DecodeError) as ei:
        load(p)
    assert "nested too deeply" in ei.value.message


def test_check_reports_encoding_failure(tmp_path):  # noqa: N802
    p = tmp_path / "latin.gltf"
    p.write_bytes(b'{"asset": {"version": "\xff\xfe"}}')
    result = check(p)
    assert not result.ok
    assert result.error.code == E_JSON

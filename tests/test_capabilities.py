from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from gltfdoc import Root
from gltfdoc.capabilities import (
    SLOTS,
    Empty,
    NoExtensions,
    NoExtras,
    RawExtensions,
    RawExtras,
    RawObject,
)
from gltfdoc.errors import E_TYPE, DecodeError

from sample_docs import minimal


@dataclass(frozen=True)
class EmissiveStrength:
    emissiveStrength: float = 1.0


@dataclass(frozen=True)
class MaterialExtensions:
    KHR_materials_emissive_strength: Optional[EmissiveStrength] = None


class EmissiveExtensions(NoExtensions):
    material = MaterialExtensions


@dataclass(frozen=True)
class NodeTag:
    tag: str = ""


class TaggedExtras(NoExtras):
    node = NodeTag


def _doc_with_slots() -> dict:
    doc = minimal()
    doc["nodes"] = [{"extras": {"tag": "hero", "weight": [1, 2]}}, {}]
    doc["materials"] = [
        {
            "extensions": {
                "KHR_materials_emissive_strength": {"emissiveStrength": 5.0},
                "VENDOR_unknown": {"x": 1},
            }
        }
    ]
    return doc


def test_default_capabilities_yield_empty_payloads():  # noqa: N802
    root = Root.from_dict(_doc_with_slots())
    assert root.nodes[0].extras == Empty()
    assert root.materials[0].extensions == Empty()
    assert root.extensions_capability is NoExtensions
    assert root.extras_capability is NoExtras


def test_absent_slot_stays_none():  # noqa: N802
    root = Root.from_dict(_doc_with_slots())
    assert root.nodes[1].extras is None
    assert root.nodes[1].extensions is None


def test_raw_capabilities_keep_json():  # noqa: N802
    root = Root.from_dict(
        _doc_with_slots(), extensions=RawExtensions, extras=RawExtras
    )
    extras = root.nodes[0].extras
    assert isinstance(extras, RawObject)
    assert extras == {"tag": "hero", "weight": [1, 2]}
    assert extras["tag"] == "hero"
    ext = root.materials[0].extensions
    assert ext["VENDOR_unknown"] == {"x": 1}
    assert root.to_dict() == _doc_with_slots()


def test_typed_payload_for_one_slot():  # noqa: N802
    root = Root.from_dict(
        _doc_with_slots(), extensions=EmissiveExtensions, extras=TaggedExtras
    )
    ext = root.materials[0].extensions
    assert isinstance(ext, MaterialExtensions)
    assert ext.KHR_materials_emissive_strength == EmissiveStrength(5.0)
    assert root.nodes[0].extras == NodeTag(tag="hero")
    # slots the capability leaves unset use its default payload
    assert EmissiveExtensions.payload("node") is Empty
    encoded = root.to_dict()
    assert encoded["materials"][0]["extensions"] == {
        "KHR_materials_emissive_strength": {"emissiveStrength": 5.0}
    }
    assert encoded["nodes"][0]["extras"] == {"tag": "hero"}


def test_slot_value_must_be_an_object():  # noqa: N802
    doc = minimal()
    doc["nodes"] = [{"extras": 3}]
    with pytest.raises(DecodeError) as ei:
        Root.from_dict(doc, extras=RawExtras)
    assert ei.value.code == E_TYPE
    assert ei.value.path == "nodes[0].extras"


def test_root_level_slots():  # noqa: N802
    doc = minimal()
    doc["extras"] = {"author": "me"}
    root = Root.from_dict(doc, extras=RawExtras)
    assert root.extras == {"author": "me"}


def test_payload_lookup():  # noqa: N802
    assert set(NoExtensions.describe()) == set(SLOTS)
    assert RawExtras.payload("skin") is RawObject
    with pytest.raises(KeyError):
        NoExtras.payload("not_a_slot")


def test_raw_object_is_a_copy():  # noqa: N802
    data = {"a": {"b": 1}}
    raw = RawObject(data)
    data["a"]["b"] = 2
    assert raw["a"] == {"b": 1}
    assert raw.encode() == {"a": {"b": 1}}
    assert len(raw) == 1


def test_nested_payload_ignores_unknown_keys():  # noqa: N802
    doc = minimal()
    doc["materials"] = [
        {
            "extensions": {
                "KHR_materials_emissive_strength": {
                    "emissiveStrength": 2.0,
                    "vendorNote": "x",
                }
            }
        }
    ]
    root = Root.from_dict(doc, extensions=EmissiveExtensions)
    ext = root.materials[0].extensions
    assert ext.KHR_materials_emissive_strength == EmissiveStrength(2.0)


def test_entities_outside_slots_stay_closed():  # noqa: N802
    doc = _doc_with_slots()
    doc["nodes"][1]["vendorNote"] = "x"
    with pytest.raises(DecodeError) as ei:
        Root.from_dict(doc, extensions=EmissiveExtensions)
    assert ei.value.path == "nodes[1].vendorNote"

"""Graph validation: every embedded index must land inside its collection.

The walk is generic: it visits every dataclass field of every entity the
root owns, descending into tuples, attribute mappings and capability
payloads, and compares each :class:`~gltfdoc.index.Index` against the
length of the collection its kind designates. Indices whose kind is scoped
to an enclosing entity (see :func:`gltfdoc.codec.entity`) are checked
against that entity's local collection instead of a root collection.

All violations are collected and raised together as one
:class:`~gltfdoc.errors.InvalidGraphError`.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .codec import json_name, scoped_kinds
from .errors import IndexViolation, invalid_graph
from .index import Index
from .logging import get_logger

# the root scene index when the document did not name one
DEFAULT_SCENE_PATH = "scene"


@dataclass(frozen=True, slots=True)
class IndexSite:
    """Where an index occurs and what it may address."""

    path: str
    index: Index[Any]
    owner: str
    # (label, length) for kinds resolved against an enclosing entity
    scope: Optional[Tuple[str, int]] = None


def _walk(
    value: Any,
    path: str,
    owner: str,
    scopes: Dict[type, Tuple[str, int]],
) -> Iterator[IndexSite]:
    if isinstance(value, Index):
        yield IndexSite(path, value, owner, scopes.get(value.kind))
        return
    if value is None or isinstance(value, (str, bytes, int, float, enum.Enum)):
        return
    if isinstance(value, (tuple, list)):
        for i, item in enumerate(value):
            yield from _walk(item, f"{path}[{i}]", owner, scopes)
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _walk(item, f"{path}.{key}", owner, scopes)
        return
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        cls = type(value)
        local = scoped_kinds(cls)
        if local:
            scopes = dict(scopes)
            for kind, attr in local.items():
                label = f"{path}.{attr}" if path else attr
                scopes[kind] = (label, len(getattr(value, attr)))
        for f in dataclasses.fields(value):
            key = json_name(f)
            if key is None:
                continue
            child = getattr(value, f.name)
            if child is None:
                continue
            cpath = f"{path}.{key}" if path else key
            yield from _walk(child, cpath, cls.__name__, scopes)


def iter_index_sites(root: Any) -> Iterator[IndexSite]:
    """Yield every index embedded anywhere in ``root``."""
    yield from _walk(root, "", type(root).__name__, {})


def find_index_violations(root: Any) -> List[IndexViolation]:
    lengths: Dict[type, Tuple[str, int]] = root.collection_lengths()
    exempt_default_scene = not getattr(root, "explicit_scene", True)
    violations: List[IndexViolation] = []
    for site in iter_index_sites(root):
        if exempt_default_scene and site.path == DEFAULT_SCENE_PATH:
            continue
        if site.scope is not None:
            label, length = site.scope
        else:
            label, length = lengths.get(
                site.index.kind, (site.index.kind.__name__, 0)
            )
        if site.index.value >= length:
            violations.append(
                IndexViolation(
                    path=site.path,
                    source_kind=site.owner,
                    target_kind=label,
                    value=site.index.value,
                    length=length,
                )
            )
    return violations


def validate_root(root: Any) -> None:
    logger = get_logger()
    violations = find_index_violations(root)
    if violations:
        for v in violations:
            logger.debug("invalid reference: %s", v.message)
        raise invalid_graph(violations)
    logger.debug("graph validation ok")


__all__ = [
    "IndexSite",
    "iter_index_sites",
    "find_index_violations",
    "validate_root",
]

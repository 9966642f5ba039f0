"""Typed, cross-reference checked glTF 2.0 documents.

    >>> from gltfdoc import Root
    >>> root = Root.from_str('{"asset": {"version": "2.0"}}')
    >>> root.cameras
    ()
"""

from ._version import __version__
from .capabilities import (
    Empty,
    Extensions,
    Extras,
    NoExtensions,
    NoExtras,
    RawExtensions,
    RawExtras,
    RawObject,
)
from .errors import (
    DecodeError,
    EnumDecodeError,
    GltfError,
    IndexLookupError,
    IndexViolation,
    InvalidGraphError,
    LoadError,
)
from .index import Index
from .root import Root
from .api import check, load, parse

__all__ = [
    "__version__",
    "Root",
    "Index",
    "Empty",
    "Extensions",
    "Extras",
    "NoExtensions",
    "NoExtras",
    "RawExtensions",
    "RawExtras",
    "RawObject",
    "GltfError",
    "DecodeError",
    "EnumDecodeError",
    "LoadError",
    "IndexViolation",
    "InvalidGraphError",
    "IndexLookupError",
    "parse",
    "load",
    "check",
]

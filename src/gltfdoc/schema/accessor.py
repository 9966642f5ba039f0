"""Typed views into buffer views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..codec import entity, extensions_field, extras_field, json_field
from ..enums import AccessorType, ComponentType, IndexComponentType
from ..index import Index

if TYPE_CHECKING:  # pragma: no cover
    from .buffer import View


@entity("accessor_sparse_indices")
@dataclass(frozen=True, slots=True)
class SparseIndices:
    buffer_view: Index[View] = json_field("bufferView")
    component_type: IndexComponentType = json_field("componentType")
    byte_offset: int = json_field("byteOffset", default=0)
    extensions: Optional[Any] = extensions_field("accessor_sparse_indices")
    extras: Optional[Any] = extras_field("accessor_sparse_indices")


@entity("accessor_sparse_values")
@dataclass(frozen=True, slots=True)
class SparseValues:
    buffer_view: Index[View] = json_field("bufferView")
    byte_offset: int = json_field("byteOffset", default=0)
    extensions: Optional[Any] = extensions_field("accessor_sparse_values")
    extras: Optional[Any] = extras_field("accessor_sparse_values")


@entity("accessor_sparse")
@dataclass(frozen=True, slots=True)
class Sparse:
    count: int = json_field()
    indices: SparseIndices = json_field()
    values: SparseValues = json_field()
    extensions: Optional[Any] = extensions_field("accessor_sparse")
    extras: Optional[Any] = extras_field("accessor_sparse")


@entity("accessor")
@dataclass(frozen=True, slots=True)
class Accessor:
    """A typed view into a buffer view, or a zero-filled range when
    ``buffer_view`` is absent."""

    count: int = json_field()
    component_type: ComponentType = json_field("componentType")
    type: AccessorType = json_field()
    buffer_view: Optional[Index[View]] = json_field("bufferView", default=None)
    byte_offset: int = json_field("byteOffset", default=0)
    normalized: bool = json_field(default=False)
    max: Optional[Tuple[float, ...]] = json_field(default=None)
    min: Optional[Tuple[float, ...]] = json_field(default=None)
    sparse: Optional[Sparse] = json_field(default=None)
    name: Optional[str] = json_field(default=None)
    extensions: Optional[Any] = extensions_field("accessor")
    extras: Optional[Any] = extras_field("accessor")


__all__ = ["Accessor", "Sparse", "SparseIndices", "SparseValues"]

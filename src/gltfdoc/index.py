"""Typed references into the collections owned by a :class:`~gltfdoc.root.Root`.

``Index[Node]`` in an annotation says "a position in ``Root.nodes``". At
runtime every instance remembers the entity class it addresses so the
validator and :meth:`Root.get` can dispatch on it without a per-kind branch.
Range checks do not happen here; they are done once for the whole graph.
"""

from __future__ import annotations

from typing import Any, Generic, Type, TypeVar

from .errors import E_TYPE, E_VALUE_RANGE, decode_error

T = TypeVar("T")

U32_MAX = 0xFFFFFFFF


class Index(Generic[T]):
    __slots__ = ("_kind", "_value")

    def __init__(self, kind: Type[T], value: int) -> None:
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Index is immutable")

    @property
    def kind(self) -> Type[T]:
        return self._kind

    @property
    def value(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __lt__(self, other: "Index[T]") -> bool:
        if not isinstance(other, Index) or other._kind is not self._kind:
            return NotImplemented
        return self._value < other._value

    def __repr__(self) -> str:
        return f"Index[{self._kind.__name__}]({self._value})"

    # JSON --------------------------------------------------------------------
    @classmethod
    def decode(cls, kind: Type[T], raw: Any, path: str = "") -> "Index[T]":
        # bool is an int subclass; JSON true/false are never indices
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise decode_error(
                E_TYPE,
                f"expected a non-negative integer index, got {raw!r}",
                path,
            )
        if raw < 0 or raw > U32_MAX:
            raise decode_error(
                E_VALUE_RANGE,
                f"index {raw} does not fit in an unsigned 32-bit integer",
                path,
            )
        return cls(kind, raw)

    def encode(self) -> int:
        return self._value


def index_kind(hint: Any) -> Any:
    """Return ``Node`` for the annotation ``Index[Node]``."""
    args = getattr(hint, "__args__", ())
    if not args:
        raise TypeError(f"unparameterised Index annotation: {hint!r}")
    return args[0]


__all__ = ["Index", "index_kind", "U32_MAX"]

"""Closed-set values and their JSON codecs.

Each enumeration is a declarative member table. Two base classes supply the
codec: :class:`TokenEnum` for string tokens and :class:`CodeEnum` for the
numeric GL constants glTF borrows. Both share :func:`decode_member`; an
unrecognised token or code is always a decode failure, never a default.
"""

from __future__ import annotations

import enum
from typing import Any, List, Type, TypeVar

from .errors import E_ENUM_VALUE, E_TYPE, EnumDecodeError, decode_error

_E = TypeVar("_E", bound=enum.Enum)

U64_MAX = 0xFFFFFFFFFFFFFFFF


def accepted_values(cls: Type[enum.Enum]) -> List[Any]:
    return [m.value for m in cls]


def decode_member(cls: Type[_E], raw: Any, path: str = "") -> _E:
    for member in cls:
        if member.value == raw:
            return member
    accepted = accepted_values(cls)
    listing = ", ".join(str(a) for a in accepted)
    raise EnumDecodeError(
        code=E_ENUM_VALUE,
        message=f"invalid {cls.__name__} value: {raw!r}; expected one of: {listing}",
        context={"path": path, "value": raw, "accepted": accepted},
    )


class TokenEnum(enum.Enum):
    """String-token backed enumeration."""

    @classmethod
    def decode(cls, raw: Any, path: str = ""):
        if not isinstance(raw, str):
            raise decode_error(
                E_TYPE, f"{cls.__name__} expects a string, got {raw!r}", path
            )
        return decode_member(cls, raw, path)

    def encode(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class CodeEnum(enum.IntEnum):
    """Unsigned integer code backed enumeration."""

    @classmethod
    def decode(cls, raw: Any, path: str = ""):
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise decode_error(
                E_TYPE, f"{cls.__name__} expects an integer, got {raw!r}", path
            )
        if raw < 0 or raw > U64_MAX:
            raise decode_error(
                E_TYPE,
                f"{cls.__name__} expects an unsigned 64-bit integer, got {raw}",
                path,
            )
        return decode_member(cls, raw, path)

    def encode(self) -> int:
        return int(self.value)


# Accessors -------------------------------------------------------------------


class ComponentType(CodeEnum):
    I8 = 5120
    U8 = 5121
    I16 = 5122
    U16 = 5123
    U32 = 5125
    F32 = 5126


class IndexComponentType(CodeEnum):
    """Component types allowed for sparse accessor indices."""

    U8 = 5121
    U16 = 5123
    U32 = 5125


class AccessorType(TokenEnum):
    SCALAR = "SCALAR"
    VEC2 = "VEC2"
    VEC3 = "VEC3"
    VEC4 = "VEC4"
    MAT2 = "MAT2"
    MAT3 = "MAT3"
    MAT4 = "MAT4"


# Buffers ---------------------------------------------------------------------


class Target(CodeEnum):
    ARRAY_BUFFER = 34962
    ELEMENT_ARRAY_BUFFER = 34963


# Animations ------------------------------------------------------------------


class Interpolation(TokenEnum):
    LINEAR = "LINEAR"
    STEP = "STEP"
    CUBICSPLINE = "CUBICSPLINE"


class TargetPath(TokenEnum):
    TRANSLATION = "translation"
    ROTATION = "rotation"
    SCALE = "scale"
    WEIGHTS = "weights"


# Cameras ---------------------------------------------------------------------


class CameraType(TokenEnum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


# Materials -------------------------------------------------------------------


class AlphaMode(TokenEnum):
    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"


# Meshes ----------------------------------------------------------------------


class Mode(CodeEnum):
    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


# Samplers --------------------------------------------------------------------


class MagFilter(CodeEnum):
    NEAREST = 9728
    LINEAR = 9729


class MinFilter(CodeEnum):
    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrappingMode(CodeEnum):
    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


__all__ = [
    "TokenEnum",
    "CodeEnum",
    "decode_member",
    "accepted_values",
    "ComponentType",
    "IndexComponentType",
    "AccessorType",
    "Target",
    "Interpolation",
    "TargetPath",
    "CameraType",
    "AlphaMode",
    "Mode",
    "MagFilter",
    "MinFilter",
    "WrappingMode",
]

"""Error definitions for gltfdoc.

Two failure families abort document construction: decode errors (bad text,
bad shape, unknown enumerator) and invalid-graph errors (an index pointing
outside its collection). Neither leaves a partially built root behind.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

E_JSON = "E_JSON"
E_TYPE = "E_TYPE"
E_MISSING_FIELD = "E_MISSING_FIELD"
E_UNKNOWN_FIELD = "E_UNKNOWN_FIELD"
E_VALUE_RANGE = "E_VALUE_RANGE"
E_ENUM_VALUE = "E_ENUM_VALUE"
E_INDEX_OUT_OF_RANGE = "E_INDEX_OUT_OF_RANGE"
E_INDEX_KIND = "E_INDEX_KIND"
E_FILE = "E_FILE"


@dataclass
class GltfError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class DecodeError(GltfError):
    @property
    def path(self) -> str:
        return (self.context or {}).get("path", "")


class EnumDecodeError(DecodeError):
    @property
    def value(self) -> Any:
        return (self.context or {}).get("value")

    @property
    def accepted(self) -> List[Any]:
        return list((self.context or {}).get("accepted", []))


class LoadError(GltfError):
    pass


@dataclass(frozen=True, slots=True)
class IndexViolation:
    """One reference whose raw value falls outside its target collection."""

    path: str
    source_kind: str
    target_kind: str
    value: int
    length: int

    @property
    def message(self) -> str:
        return (
            f"{self.path}: {self.source_kind} references "
            f"{self.target_kind}[{self.value}] but only {self.length} exist"
        )

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "source_kind": self.source_kind,
            "target_kind": self.target_kind,
            "value": self.value,
            "length": self.length,
        }


@dataclass
class InvalidGraphError(GltfError):
    violations: List[IndexViolation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out["violations"] = [v.to_dict() for v in self.violations]
        return out


class IndexLookupError(GltfError, LookupError):
    pass


def decode_error(
    code: str, message: str, path: str = "", **context: Any
) -> DecodeError:
    return DecodeError(code=code, message=message, context={"path": path, **context})


def too_deep(file: str = "") -> DecodeError:
    ctx: Dict[str, Any] = {"path": ""}
    if file:
        ctx["file"] = file
    return DecodeError(
        code=E_JSON, message="document nested too deeply", context=ctx
    )


def invalid_graph(violations: List[IndexViolation]) -> InvalidGraphError:
    first = violations[0]
    more = len(violations) - 1
    message = first.message + (f" (and {more} more)" if more else "")
    return InvalidGraphError(
        code=E_INDEX_OUT_OF_RANGE,
        message=message,
        context={"count": len(violations)},
        violations=list(violations),
    )


__all__ = [
    "GltfError",
    "DecodeError",
    "EnumDecodeError",
    "LoadError",
    "IndexViolation",
    "InvalidGraphError",
    "IndexLookupError",
    "decode_error",
    "invalid_graph",
    "too_deep",
    "E_JSON",
    "E_TYPE",
    "E_MISSING_FIELD",
    "E_UNKNOWN_FIELD",
    "E_VALUE_RANGE",
    "E_ENUM_VALUE",
    "E_INDEX_OUT_OF_RANGE",
    "E_INDEX_KIND",
    "E_FILE",
]

"""High-level API for gltfdoc.

Thin wrappers over :class:`~gltfdoc.root.Root` that the CLI (and callers who
prefer functions) use: decode text, load files, and check a file while
collecting every problem instead of stopping at an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Type, Union

from .capabilities import Extensions, Extras, NoExtensions, NoExtras
from .errors import DecodeError, GltfError, IndexViolation, InvalidGraphError
from .loader import load_document
from .logging import get_logger
from .reporting import task
from .root import Root

__all__ = [
    "CheckResult",
    "parse",
    "load",
    "check",
]


@dataclass(slots=True)
class CheckResult:
    path: Path
    root: Optional[Root[Any, Any]] = None
    error: Optional[GltfError] = None
    violations: List[IndexViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "ok": self.ok,
            "error": self.error.to_dict() if self.error else None,
            "counts": self.root.counts() if self.root else {},
        }


def parse(
    text: Union[str, bytes],
    *,
    extensions: Type[Extensions] = NoExtensions,
    extras: Type[Extras] = NoExtras,
) -> Root[Any, Any]:
    return Root.from_str(text, extensions=extensions, extras=extras)


def load(
    path: Union[str, Path],
    *,
    extensions: Type[Extensions] = NoExtensions,
    extras: Type[Extras] = NoExtras,
) -> Root[Any, Any]:
    return load_document(path, extensions=extensions, extras=extras)


def check(
    path: Union[str, Path],
    *,
    extensions: Type[Extensions] = NoExtensions,
    extras: Type[Extras] = NoExtras,
) -> CheckResult:
    """Load ``path`` and report the outcome instead of raising."""
    logger = get_logger()
    result = CheckResult(path=Path(path))
    try:
        with task("document.load", f"Load {result.path.name}"):
            result.root = load(path, extensions=extensions, extras=extras)
    except InvalidGraphError as e:
        result.error = e
        result.violations = list(e.violations)
        logger.info(
            "%s: %d invalid reference(s)", result.path.name, len(e.violations)
        )
    except DecodeError as e:
        result.error = e
        logger.info("%s: decode failed at '%s'", result.path.name, e.path)
    except GltfError as e:
        result.error = e
        logger.info("%s: %s", result.path.name, e.message)
    return result

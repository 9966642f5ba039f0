"""Document loading utilities (JSON/YAML files)."""

from __future__ import annotations
from pathlib import Path
from typing import Any, Type
import json

import yaml

from .capabilities import Extensions, Extras, NoExtensions, NoExtras
from .errors import E_FILE, E_JSON, DecodeError, LoadError, too_deep
from .logging import get_logger
from .root import Root

YAML_SUFFIXES = {".yaml", ".yml"}


def read_document(path: str | Path) -> Any:
    """Parse a document file into plain JSON values without decoding it."""
    p = Path(path)
    if not p.exists():
        raise LoadError(
            code=E_FILE, message=f"file not found: {p}", context={"path": str(p)}
        )
    suffix = p.suffix.lower()
    if suffix == ".glb":
        raise LoadError(
            code=E_FILE,
            message="binary .glb containers are not supported",
            context={"path": str(p)},
        )
    try:
        text = p.read_text(encoding="utf-8-sig")
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except UnicodeDecodeError as e:
        raise DecodeError(
            code=E_JSON,
            message=f"not valid UTF-8: {e.reason} at byte {e.start}",
            context={"path": "", "file": str(p), "offset": e.start},
        ) from e
    except OSError as e:
        raise LoadError(
            code=E_FILE,
            message=f"cannot read {p}: {e.strerror or e}",
            context={"path": str(p)},
        ) from e
    except json.JSONDecodeError as e:
        raise DecodeError(
            code=E_JSON,
            message=f"malformed JSON: {e}",
            context={"path": "", "file": str(p), "line": e.lineno},
        ) from e
    except yaml.YAMLError as e:
        raise DecodeError(
            code=E_JSON,
            message=f"malformed YAML: {e}",
            context={"path": "", "file": str(p)},
        ) from e
    except RecursionError as e:
        raise too_deep(str(p)) from e


def load_document(
    path: str | Path,
    *,
    extensions: Type[Extensions] = NoExtensions,
    extras: Type[Extras] = NoExtras,
) -> Root[Any, Any]:
    logger = get_logger()
    data = read_document(path)
    logger.debug("loaded %s", Path(path).name)
    return Root.from_dict(data, extensions=extensions, extras=extras)


__all__ = ["read_document", "load_document", "YAML_SUFFIXES"]

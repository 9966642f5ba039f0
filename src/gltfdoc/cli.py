"""Command line interface for gltfdoc."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, Type

from .api import check, load
from .capabilities import (
    Extensions,
    Extras,
    NoExtensions,
    NoExtras,
    RawExtensions,
    RawExtras,
)
from .errors import GltfError
from .logging import configure_logging, get_logger
from .reporting import (
    REPORTER_CHOICES,
    RichReporter,
    default_reporter_name,
    get_reporter,
    make_reporter,
    section,
    set_reporter,
    set_verbosity,
)

_EXTENSIONS: Dict[str, Type[Extensions]] = {
    "none": NoExtensions,
    "raw": RawExtensions,
}
_EXTRAS: Dict[str, Type[Extras]] = {"none": NoExtras, "raw": RawExtras}


def _capabilities(args: argparse.Namespace) -> dict:
    return {
        "extensions": _EXTENSIONS[args.extensions],
        "extras": _EXTRAS[args.extras],
    }


def _validate_cmd(args: argparse.Namespace) -> int:
    rep = get_reporter()
    failed = 0
    for path in args.files:
        result = check(path, **_capabilities(args))
        if result.ok:
            rep.status(f"{path.name}: ok")
            continue
        failed += 1
        assert result.error is not None
        if result.violations:
            rep.section(f"{path.name}: invalid references")
            for v in result.violations:
                rep.violation(v)
        else:
            rep.error(f"{path.name}: {result.error}")
    rep.status(
        "Validate summary: "
        + f"files={len(args.files)} ok={len(args.files) - failed} failed={failed}"
    )
    return 1 if failed else 0


def _summary_cmd(args: argparse.Namespace) -> int:
    caps = _capabilities(args)
    root = load(args.file, **caps)
    asset = root.asset
    with section(args.file.name) as rep:
        rep.status(
            f"asset version={asset.version} generator={asset.generator or '-'}"
        )
        rows = [(name, count) for name, count in root.counts().items() if count]
        rep.table("Collections", ("collection", "count"), rows)
        if root.extensions_used:
            rep.status("extensionsUsed: " + ", ".join(root.extensions_used))
        if root.extensions_required:
            rep.warning(
                "extensionsRequired: " + ", ".join(root.extensions_required)
            )
        refs = sum(1 for _ in root.iter_indices())
        rep.verbose(f"references checked: {refs}")
        for axis, cap in caps.items():
            payloads = sorted(set(cap.describe().values()))
            rep.verbose(
                f"{axis}: {cap.__name__} ({', '.join(payloads)})", level=2
            )
    return 0


def _dump_cmd(args: argparse.Namespace) -> int:
    root = load(args.file, **_capabilities(args))
    rep = get_reporter()
    rep.flush()
    print(json.dumps(root.to_dict(), indent=args.indent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gltfdoc", description="glTF 2.0 document decoder and validator"
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=REPORTER_CHOICES,
        default=default_reporter_name(),
        help="Reporter backend: plain (default, or $GLTFDOC_REPORTER), "
        "rich, json (JSONL events), silent",
    )
    p.add_argument(
        "--extensions",
        choices=sorted(_EXTENSIONS),
        default="none",
        help="How to decode extensions slots: none (ignore) or raw (keep JSON)",
    )
    p.add_argument(
        "--extras",
        choices=sorted(_EXTRAS),
        default="none",
        help="How to decode extras slots: none (ignore) or raw (keep JSON)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    v = sub.add_parser("validate", help="Decode and validate documents")
    v.add_argument("files", type=Path, nargs="+")
    v.set_defaults(func=_validate_cmd)

    s = sub.add_parser("summary", help="Print collection counts")
    s.add_argument("file", type=Path)
    s.set_defaults(func=_summary_cmd)

    d = sub.add_parser("dump", help="Re-encode a document as JSON on stdout")
    d.add_argument("file", type=Path)
    d.add_argument("--indent", type=int, default=2)
    d.set_defaults(func=_dump_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    rep = make_reporter(args.reporter)
    set_reporter(rep)
    set_verbosity(args.verbose)
    configure_logging(args.verbose, use_rich=isinstance(rep, RichReporter))
    try:
        return args.func(args)
    except GltfError as e:
        get_logger().debug("command failed", exc_info=True)
        get_reporter().error(str(e))
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

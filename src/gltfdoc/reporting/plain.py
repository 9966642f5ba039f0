from __future__ import annotations

import sys
from typing import Any, Dict, Sequence, Tuple

from .base import Level, Reporter, TaskRecord, TaskStatus

ICONS = {
    TaskStatus.SUCCESS: "✔",
    TaskStatus.FAILED: "✖",
}

# level -> (label, ANSI color)
_PREFIX = {
    Level.INFO: ("INFO", "32"),
    Level.VERBOSE: ("VERB", "36"),
    Level.WARNING: ("WARN", "33"),
    Level.ERROR: ("ERROR", "31"),
}


class PlainReporter(Reporter):
    """Line oriented reporter; color only when the stream is a terminal."""

    def __init__(self, stream=None, use_color: bool | None = None):
        super().__init__()
        self.stream = stream or sys.stderr
        if use_color is None:
            use_color = getattr(self.stream, "isatty", lambda: False)()
        self.use_color = use_color

    def _c(self, code: str, text: str) -> str:
        return f"\x1b[{code}m{text}\x1b[0m" if self.use_color else text

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")

    def _message(
        self, level: Level, message: str, vlevel: int, fields: Dict[str, Any]
    ) -> None:
        label, color = _PREFIX[level]
        if level is Level.VERBOSE:
            label = f"{label}{vlevel}"
        self._write(f"{self._c(color, label)}: {message}")

    def _task_finished(self, rec: TaskRecord) -> None:
        stats = rec.stats()
        stats_part = f" [{stats}]" if stats else ""
        icon = ICONS.get(rec.status, "?")
        self._write(f" {icon} {rec.name} ({rec.duration:.2f}s){stats_part}")

    def section(self, title: str) -> None:
        self._write(f"\n[{title}]")

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Tuple[Any, ...]],
    ) -> None:
        cells = [[str(c) for c in columns]]
        cells.extend([str(v) for v in row] for row in rows)
        widths = [max(len(r[i]) for r in cells) for i in range(len(columns))]
        self._write(title)
        for r in cells:
            line = "  ".join(v.ljust(w) for v, w in zip(r, widths))
            self._write(f"  {line.rstrip()}")

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Dict, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .base import Level, Reporter, TaskRecord, TaskStatus

if TYPE_CHECKING:  # pragma: no cover
    from ..errors import IndexViolation

_STATUS_ICON = {
    TaskStatus.SUCCESS: "[green]✔[/]",
    TaskStatus.FAILED: "[red]✖[/]",
}

_PREFIX = {
    Level.INFO: "[green]INFO[/]",
    Level.VERBOSE: "[cyan]VERB{n}[/]",
    Level.WARNING: "[yellow]WARN[/]",
    Level.ERROR: "[bold red]ERROR[/]",
}


def _timings_enabled() -> bool:
    # GLTFDOC_NO_TIMINGS=1 drops durations from task lines (stable logs)
    return os.getenv("GLTFDOC_NO_TIMINGS", "0").lower() not in ("1", "true", "yes")


class RichReporter(Reporter):
    def __init__(self, console: Console | None = None):
        super().__init__()
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        self._timings = _timings_enabled()

    def _message(
        self, level: Level, message: str, vlevel: int, fields: Dict[str, Any]
    ) -> None:
        prefix = _PREFIX[level].format(n=vlevel)
        self.console.print(f"{prefix}: {escape(message)}")

    def _task_finished(self, rec: TaskRecord) -> None:
        icon = _STATUS_ICON.get(rec.status, "")
        dur = f" ({rec.duration:.2f}s)" if self._timings else ""
        stats = rec.stats()
        stats_part = f" [dim]\\[{escape(stats)}][/]" if stats else ""
        self.console.print(f"{icon} {escape(rec.name)}{dur}{stats_part}")

    def section(self, title: str) -> None:
        self.console.rule(escape(title))

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Tuple[Any, ...]],
    ) -> None:
        table = Table(title=title, show_header=True, header_style="bold")
        for col in columns:
            table.add_column(col)
        for row in rows:
            table.add_row(*(escape(str(v)) for v in row))
        self.console.print(table)

    def violation(self, v: "IndexViolation") -> None:
        self.console.print(
            f"[bold red]ERROR[/]: [bold]{escape(v.path)}[/] "
            f"{escape(v.source_kind)} -> {escape(v.target_kind)}"
            f"\\[{v.value}] (length {v.length})"
        )

    def flush(self) -> None:
        self.console.file.flush()

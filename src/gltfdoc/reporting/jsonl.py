from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, Dict, Sequence, Tuple

from .base import Level, Reporter, TaskRecord

if TYPE_CHECKING:  # pragma: no cover
    from ..errors import IndexViolation


class JsonLinesReporter(Reporter):
    """One JSON object per line on stdout, for tooling."""

    def __init__(self, stream=None):
        super().__init__()
        self.stream = stream or sys.stdout

    def _emit(self, event: str, **payload: Any) -> None:
        payload["event"] = event
        self.stream.write(json.dumps(payload, sort_keys=True, default=str) + "\n")

    def _message(
        self, level: Level, message: str, vlevel: int, fields: Dict[str, Any]
    ) -> None:
        extra: Dict[str, Any] = dict(fields)
        if level is Level.VERBOSE:
            extra["vlevel"] = vlevel
        self._emit("status", message=message, level=level.value, **extra)

    def _task_started(self, rec: TaskRecord) -> None:
        self._emit("task_start", id=rec.task_id, name=rec.name, **rec.meta)

    def _task_finished(self, rec: TaskRecord) -> None:
        self._emit(
            "task_end",
            id=rec.task_id,
            status=rec.status.name.lower(),
            duration_seconds=rec.duration,
            **rec.meta,
        )

    def section(self, title: str) -> None:
        self._emit("section", title=title)

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Tuple[Any, ...]],
    ) -> None:
        self._emit(
            "table", title=title, rows=[dict(zip(columns, row)) for row in rows]
        )

    def violation(self, v: "IndexViolation") -> None:
        self._emit("violation", message=v.message, **v.to_dict())

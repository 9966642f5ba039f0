"""Reporter protocol, global reporter and verbosity state.

A reporter receives four kinds of output: timed tasks, leveled messages,
section headings and small tables, plus one domain event, the invalid
reference. Backends only render; bookkeeping (task timing, verbosity
gating) lives here.
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from ..errors import IndexViolation

__all__ = [
    "TaskStatus",
    "TaskRecord",
    "Level",
    "Reporter",
    "set_reporter",
    "get_reporter",
    "set_verbosity",
    "get_verbosity",
    "section",
    "task",
]


class TaskStatus(Enum):
    RUNNING = auto()
    SUCCESS = auto()
    FAILED = auto()


class Level(Enum):
    INFO = "info"
    VERBOSE = "verbose"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class TaskRecord:
    task_id: str
    name: str
    status: TaskStatus = TaskStatus.RUNNING
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration(self) -> float:
        return (self.end_time - self.start_time) if self.end_time else 0.0

    def stats(self) -> str:
        return " ".join(f"{k}={v}" for k, v in sorted(self.meta.items()))


_VERBOSITY: int = 0  # set by the CLI (-v repeats)


def set_verbosity(level: int) -> None:
    global _VERBOSITY
    _VERBOSITY = max(0, level)


def get_verbosity() -> int:
    return _VERBOSITY


class Reporter:
    def __init__(self) -> None:
        self._tasks: Dict[str, TaskRecord] = {}

    # Rendering hooks ---------------------------------------------------------
    def _message(
        self, level: Level, message: str, vlevel: int, fields: Dict[str, Any]
    ) -> None:
        raise NotImplementedError

    def _task_started(self, rec: TaskRecord) -> None:
        pass

    def _task_finished(self, rec: TaskRecord) -> None:
        raise NotImplementedError

    def section(self, title: str) -> None:  # noqa: D401
        raise NotImplementedError

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Tuple[Any, ...]],
    ) -> None:
        """Render a small table; the default prints one status line per row."""
        for row in rows:
            self.status(
                " ".join(f"{c}={v}" for c, v in zip(columns, row)),
                table=title,
            )

    def violation(self, v: "IndexViolation") -> None:
        self.error(v.message, **v.to_dict())

    def flush(self) -> None:  # noqa: D401
        pass

    # Tasks -------------------------------------------------------------------
    def start_task(self, task_id: str, name: str, **meta: Any) -> None:
        rec = TaskRecord(task_id, name, meta=dict(meta))
        self._tasks[task_id] = rec
        self._task_started(rec)

    def end_task(
        self,
        task_id: str,
        status: TaskStatus = TaskStatus.SUCCESS,
        **final_meta: Any,
    ) -> None:
        rec = self._tasks.pop(task_id, None)
        if rec is None:
            return
        rec.status = status
        rec.end_time = time.time()
        rec.meta.update(final_meta)
        self._task_finished(rec)

    # Messages ----------------------------------------------------------------
    def status(self, message: str, **fields: Any) -> None:
        self._message(Level.INFO, message, 0, fields)

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self._message(Level.VERBOSE, message, level, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._message(Level.WARNING, message, 0, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._message(Level.ERROR, message, 0, fields)


_ACTIVE_REPORTER: Reporter | None = None


def set_reporter(rep: Reporter) -> None:
    global _ACTIVE_REPORTER
    _ACTIVE_REPORTER = rep


def get_reporter() -> Reporter:
    global _ACTIVE_REPORTER
    if _ACTIVE_REPORTER is None:
        from .plain import PlainReporter  # local import to avoid cycle

        _ACTIVE_REPORTER = PlainReporter(stream=sys.stderr)
    return _ACTIVE_REPORTER


@contextmanager
def section(title: str) -> Iterator[Reporter]:
    rep = get_reporter()
    rep.section(title)
    yield rep


@contextmanager
def task(task_id: str, name: str, **meta: Any) -> Iterator[Optional[Reporter]]:
    rep = get_reporter()
    rep.start_task(task_id, name, **meta)
    try:
        yield rep
    except Exception:
        rep.end_task(task_id, TaskStatus.FAILED)
        raise
    else:
        rep.end_task(task_id, TaskStatus.SUCCESS)

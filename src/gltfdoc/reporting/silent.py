from __future__ import annotations

from .base import Reporter


class SilentReporter(Reporter):
    """Discards everything (``-r silent``; also the test default)."""

    def _message(self, level, message, vlevel, fields) -> None:
        pass

    def _task_finished(self, rec) -> None:
        pass

    def section(self, title: str) -> None:
        pass

    def table(self, title, columns, rows) -> None:
        pass

    def violation(self, v) -> None:
        pass

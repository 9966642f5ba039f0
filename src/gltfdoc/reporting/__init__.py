"""Console reporting backends shared by the CLI and the logging bridge."""

from __future__ import annotations

import os
import sys

from .base import (
    Level,
    Reporter,
    TaskStatus,
    get_reporter,
    set_reporter,
    get_verbosity,
    set_verbosity,
    section,
    task,
)
from .plain import PlainReporter
from .jsonl import JsonLinesReporter
from .silent import SilentReporter
from .rich_reporter import RichReporter

REPORTER_ENV = "GLTFDOC_REPORTER"
REPORTER_CHOICES = ("plain", "rich", "json", "silent")


def default_reporter_name() -> str:
    name = os.getenv(REPORTER_ENV, "plain").strip().lower()
    return name if name in REPORTER_CHOICES else "plain"


def make_reporter(name: str) -> Reporter:
    if name == "json":
        return JsonLinesReporter()
    if name == "silent":
        return SilentReporter()
    if name == "rich":
        # rich output only makes sense on a terminal
        if sys.stderr.isatty():
            return RichReporter()
        return PlainReporter()
    return PlainReporter()


__all__ = [
    "Level",
    "Reporter",
    "TaskStatus",
    "get_reporter",
    "set_reporter",
    "section",
    "task",
    "set_verbosity",
    "get_verbosity",
    "PlainReporter",
    "JsonLinesReporter",
    "SilentReporter",
    "RichReporter",
    "REPORTER_ENV",
    "REPORTER_CHOICES",
    "default_reporter_name",
    "make_reporter",
]

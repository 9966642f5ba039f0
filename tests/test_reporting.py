from __future__ import annotations

import io
import json
import logging

import pytest
from rich.console import Console

from gltfdoc.errors import IndexViolation
from gltfdoc.logging import configure_logging, get_logger
from gltfdoc.reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    TaskStatus,
    make_reporter,
    set_reporter,
    set_verbosity,
    task,
)


def test_plain_reporter_lines():  # noqa: N802
    buf = io.StringIO()
    rep = PlainReporter(stream=buf, use_color=False)
    rep.status("hello")
    rep.warning("careful")
    rep.error("boom")
    rep.section("Box")
    rep.table("Collections", ("collection", "count"), [("nodes", 3), ("meshes", 12)])
    lines = buf.getvalue().splitlines()
    assert lines[:3] == ["INFO: hello", "WARN: careful", "ERROR: boom"]
    assert "[Box]" in lines
    assert "  nodes       3" in lines
    assert "  meshes      12" in lines


def test_verbose_is_gated_by_verbosity():  # noqa: N802
    buf = io.StringIO()
    rep = PlainReporter(stream=buf, use_color=False)
    try:
        set_verbosity(0)
        rep.verbose("hidden")
        set_verbosity(2)
        rep.verbose("shown", level=2)
    finally:
        set_verbosity(0)
    assert buf.getvalue() == "VERB2: shown\n"


def test_task_context_reports_failure():  # noqa: N802
    buf = io.StringIO()
    rep = JsonLinesReporter(stream=buf)
    set_reporter(rep)
    try:
        with task("t1", "Good"):
            pass
        with pytest.raises(ValueError):
            with task("t2", "Bad", file="x.gltf"):
                raise ValueError("nope")
    finally:
        set_reporter(SilentReporter())
    events = [json.loads(line) for line in buf.getvalue().splitlines()]
    ends = {e["id"]: e for e in events if e["event"] == "task_end"}
    assert ends["t1"]["status"] == TaskStatus.SUCCESS.name.lower()
    assert ends["t2"]["status"] == "failed"
    assert ends["t2"]["file"] == "x.gltf"


def test_rich_reporter_renders_table():  # noqa: N802
    buf = io.StringIO()
    rep = RichReporter(Console(file=buf, width=80, color_system=None))
    rep.section("Box")
    rep.table("Collections", ("collection", "count"), [("nodes", 3)])
    rep.error("bad [ref]")
    out = buf.getvalue()
    assert "Collections" in out
    assert "nodes" in out
    assert "bad [ref]" in out


def test_make_reporter():  # noqa: N802
    assert isinstance(make_reporter("json"), JsonLinesReporter)
    assert isinstance(make_reporter("silent"), SilentReporter)
    assert isinstance(make_reporter("plain"), PlainReporter)


def test_logging_routes_to_active_reporter():  # noqa: N802
    buf = io.StringIO()
    set_reporter(JsonLinesReporter(stream=buf))
    try:
        configure_logging(0)
        log = get_logger()
        log.info("decoded %d nodes", 3)
        log.warning("odd")
        log.debug("not shown at verbosity 0")
    finally:
        set_reporter(SilentReporter())
    events = [json.loads(line) for line in buf.getvalue().splitlines()]
    assert [(e["level"], e["message"]) for e in events] == [
        ("info", "decoded 3 nodes"),
        ("warning", "odd"),
    ]
    assert get_logger().level == logging.INFO


def test_violation_rendering():  # noqa: N802
    v = IndexViolation("nodes[0].mesh", "Node", "meshes", 1, 1)
    buf = io.StringIO()
    PlainReporter(stream=buf, use_color=False).violation(v)
    assert buf.getvalue() == (
        "ERROR: nodes[0].mesh: Node references meshes[1] but only 1 exist\n"
    )
    buf = io.StringIO()
    JsonLinesReporter(stream=buf).violation(v)
    event = json.loads(buf.getvalue())
    assert event["event"] == "violation"
    assert event["value"] == 1

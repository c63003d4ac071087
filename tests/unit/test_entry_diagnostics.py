from __future__ import annotations

import pytest

from helpdoc.entry import format_diagnostic, report_diagnostics
from helpdoc.observability.obs import TraceDiagnostics
from helpdoc.observability.trace.context import TraceContext
from helpdoc.observability.trace.envelope import EventRecord


def _diagnosed_trace():
    diag = TraceDiagnostics(document="builtin")
    ctx = TraceContext.new("t-entry", catalog="functions", document="builtin")
    with TraceContext.activate(ctx):
        with ctx.start_span("stage.catalog"):
            diag.debug("unknown return type", name="weird", spelling="thing")
            diag.error("could not parse function-list entry", chunk={"text": "noret()"})
            ctx.add_event("catalog.built", {"entry_count": 4})
    return ctx.finish()


def test_format_diagnostic() -> None:
    ev = EventRecord(
        ts=0.0,
        kind="diag.error",
        attrs={"message": "bad row", "chunk": {"text": "x()"}, "document": "builtin"},
    )
    assert format_diagnostic(ev) == 'helpdoc: error: bad row (chunk={"text": "x()"}, document=builtin)'
    assert format_diagnostic(EventRecord(ts=0.0, kind="diag.debug", attrs={"message": "m"})) == "helpdoc: debug: m"


def test_report_diagnostics_prints_each_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    trace = _diagnosed_trace()

    assert report_diagnostics(trace) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == [
        "helpdoc: debug: unknown return type (document=builtin, name=weird, spelling=thing)",
        'helpdoc: error: could not parse function-list entry (chunk={"text": "noret()"}, document=builtin)',
    ]


def test_report_diagnostics_quiet_keeps_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_diagnostics(_diagnosed_trace(), quiet=True) == 1
    assert capsys.readouterr().err.startswith("helpdoc: error: could not parse")

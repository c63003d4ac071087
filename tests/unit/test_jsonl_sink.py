from __future__ import annotations

import json
from pathlib import Path

from helpdoc.observability.readers.jsonl_reader import JsonlReader
from helpdoc.observability.sinks.jsonl import JsonlSink, resolve_trace_path
from helpdoc.observability.trace.context import TraceContext
from helpdoc.observability.trace.envelope import TraceEnvelope


def _make_envelope(trace_id: str) -> TraceEnvelope:
    ctx = TraceContext.new(trace_id, trace_type="extraction", catalog="options", document="options")
    ctx.providers_snapshot["catalog"] = "options"
    with TraceContext.activate(ctx):
        with ctx.start_span("stage.segment"):
            ctx.add_event("segment.chunks", {"chunk_count": 3, "tags": ("a", "b")})
        return ctx.finish()


def test_resolve_trace_path(tmp_path: Path) -> None:
    assert resolve_trace_path(tmp_path) == tmp_path / "traces.jsonl"
    assert resolve_trace_path(tmp_path / "x.jsonl") == tmp_path / "x.jsonl"


def test_jsonl_sink_write_and_append(tmp_path: Path) -> None:
    sink = JsonlSink(tmp_path / "logs")
    sink.write(_make_envelope("t-1"))
    sink.on_trace_end(_make_envelope("t-2"))

    lines = (tmp_path / "logs" / "traces.jsonl").read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 2

    rec = json.loads(lines[0])
    assert rec["trace_id"] == "t-1"
    assert rec["providers"] == {"catalog": "options"}
    assert rec["spans"][0]["events"][0]["attrs"]["tags"] == ["a", "b"]
    assert "start_ts" in rec and "end_ts" in rec


def test_jsonl_reader_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "traces.jsonl"
    sink = JsonlSink(path)
    original = _make_envelope("t-3")
    sink.write(_make_envelope("t-other"))
    sink.write(original)
    with path.open("a", encoding="utf-8") as f:
        f.write("\n[]\n")

    reader = JsonlReader(path)
    assert [t.trace_id for t in reader.iter_traces()] == ["t-other", "t-3"]

    loaded = reader.get("t-3")
    assert loaded is not None
    assert loaded.trace_type == "extraction"
    assert (loaded.catalog, loaded.document) == ("options", "options")
    assert loaded.spans[0].name == "stage.segment"
    assert loaded.spans[0].events[0].kind == "segment.chunks"
    assert loaded.aggregates == original.aggregates
    assert reader.get("missing") is None


def test_jsonl_reader_missing_file(tmp_path: Path) -> None:
    assert list(JsonlReader(tmp_path / "nothing").iter_traces()) == []

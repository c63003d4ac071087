from __future__ import annotations

from helpdoc.extraction import DEFAULT_STAGE_ORDER, ExtractionPipeline, StageSpec


def test_extraction_pipeline_stage_order_and_spans() -> None:
    stages = []
    for name in DEFAULT_STAGE_ORDER:
        stages.append(StageSpec(name=name, fn=lambda data, ctx, n=name: f"{data}:{n}"))

    pipeline = ExtractionPipeline(stages)
    assert pipeline.stage_names == DEFAULT_STAGE_ORDER
    result = pipeline.run("start", strategy_config_id="vim.default")

    assert result.ok
    assert result.output == "start:source:segment:catalog"
    assert result.trace is not None
    assert result.trace.trace_type == "extraction"
    span_names = [s.name for s in result.trace.spans]
    assert span_names == [f"stage.{name}" for name in DEFAULT_STAGE_ORDER]
    result.trace.validate(strict=True)


def test_extraction_pipeline_error() -> None:
    def bad_stage(data, ctx):
        raise ValueError("boom")

    stages = [StageSpec(name="source", fn=bad_stage), StageSpec(name="segment", fn=lambda d, c: d)]
    pipeline = ExtractionPipeline(stages)
    result = pipeline.run("start", strategy_config_id="vim.default")

    assert result.status == "error"
    assert result.error is not None
    assert result.error.stage == "source"
    assert "boom" in result.error.message
    assert result.trace is not None
    assert [s.name for s in result.trace.spans] == ["stage.source"]
    assert "stage.error" in set(result.trace.iter_event_kinds())


def test_extraction_pipeline_progress_callback() -> None:
    events: list[tuple[str, float, str]] = []

    def on_progress(stage, percent, message, payload=None):
        events.append((stage, percent, message))

    stages = [StageSpec(name="source", fn=lambda data, ctx: data), StageSpec(name="segment", fn=lambda d, c: d)]
    pipeline = ExtractionPipeline(stages)
    pipeline.run("start", strategy_config_id="vim.default", on_progress=on_progress)

    assert events == [
        ("source", 0.0, "start"),
        ("source", 50.0, "end"),
        ("segment", 50.0, "start"),
        ("segment", 100.0, "end"),
    ]


def test_stage_context_carries_trace_id() -> None:
    seen = []
    pipeline = ExtractionPipeline([StageSpec(name="source", fn=lambda data, ctx: seen.append(ctx) or data)])
    result = pipeline.run("x", strategy_config_id="scfg_1")

    assert seen[0].trace_id == result.trace_id
    assert seen[0].stage == "source"
    assert seen[0].strategy_config_id == "scfg_1"

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ...extraction import ExtractionPipeline, StageSpec
from ...extraction.models import CatalogEntry, ExtractResult, OptionEntry, ProgressCallback
from ...extraction.stages import CatalogStage, SegmentStage, SourceStage
from ...extraction.stages.build import CatalogBuilder, FunctionCatalogBuilder, LuaCatalogBuilder, OptionCatalogBuilder
from ...libs.factories import ExtractionGraph, make_extraction_components
from ...libs.factories.common import _extract_provider_cfg
from ...libs.providers import register_builtin_providers
from ...libs.registry import ProviderRegistry
from ...observability.obs import TraceDiagnostics
from ..strategy import CatalogConfig, StrategyConfig, StrategyLoader, load_settings


@dataclass
class ExtractState:
    catalog: str
    document: str

    lines: list[str] | None = None
    chunks: Any | None = None  # list[Chunk]
    output: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)


@dataclass
class ExtractRunner:
    """User-facing extraction entry (the CLI calls this).

    Loads settings + strategy, wires providers through the registry, and runs
    source -> segment -> catalog for one configured catalog.
    """

    settings_path: str | Path = "config/settings.yaml"

    def run(
        self,
        catalog: str,
        *,
        strategy_config_id: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractResult:
        settings_path = Path(self.settings_path).expanduser().resolve()
        settings = load_settings(settings_path)
        strategy_id = strategy_config_id or settings.defaults.strategy_config_id

        strategy = StrategyLoader(root=settings_path.parent.parent).load(strategy_id)
        cfg = strategy.catalog(catalog)
        graph = build_graph(strategy, doc_dir=settings.paths.doc_dir)
        pipeline = build_extraction_pipeline(cfg, graph=graph, strategy=strategy)

        state = ExtractState(catalog=catalog, document=cfg.document)
        return pipeline.run(state, strategy_config_id=strategy.strategy_config_id, on_progress=on_progress)

    def functions(self, **kwargs: Any) -> dict[str, CatalogEntry]:
        return _unwrap(self.run("functions", **kwargs))

    def lua(self, **kwargs: Any) -> dict[str, CatalogEntry]:
        return _unwrap(self.run("lua", **kwargs))

    def options(self, **kwargs: Any) -> dict[str, OptionEntry]:
        return _unwrap(self.run("options", **kwargs))


def _unwrap(result: ExtractResult) -> dict[str, Any]:
    if result.error is not None:
        raise result.error
    assert isinstance(result.output, ExtractState)
    return result.output.output


def build_graph(strategy: StrategyConfig, *, doc_dir: Path | None = None) -> ExtractionGraph:
    registry = ProviderRegistry()
    register_builtin_providers(registry)

    providers: dict[str, Any] = dict(strategy.providers)
    source = _extract_provider_cfg(providers, "source")
    # settings.paths.doc_dir fills in for a runtime_doc source without its own doc_dir
    if doc_dir is not None and source is not None and source.get("provider_id") == "source.runtime_doc":
        params: Mapping[str, Any] = source.get("params", {})
        if "doc_dir" not in params:
            providers["source"] = {"provider_id": "source.runtime_doc", "params": {**params, "doc_dir": doc_dir}}

    return make_extraction_components({"providers": providers}, registry)


def make_builder(cfg: CatalogConfig, graph: ExtractionGraph) -> CatalogBuilder:
    if cfg.builder == "functions":
        return FunctionCatalogBuilder(
            signature_parser=graph.signature_parser,
            type_map=graph.type_map,
            diagnostics=TraceDiagnostics(document=cfg.document),
            pattern=cfg.pattern,
            function_list_tag=cfg.function_list_tag,
        )
    if cfg.builder == "lua":
        return LuaCatalogBuilder(
            signature_parser=graph.signature_parser,
            oracle=graph.oracle,
            qualify_tag_pattern=cfg.qualify_tag_pattern,
        )
    if cfg.builder == "options":
        return OptionCatalogBuilder(pattern=cfg.pattern)
    raise ValueError(f"unknown builder: {cfg.builder!r}")


def build_extraction_pipeline(
    cfg: CatalogConfig,
    *,
    graph: ExtractionGraph,
    strategy: StrategyConfig | None = None,
) -> ExtractionPipeline:
    source = SourceStage(source=graph.source)
    segment = SegmentStage(segmenter=graph.segmenter)
    catalog = CatalogStage(builder=make_builder(cfg, graph))

    def st_source(state: ExtractState, ctx) -> ExtractState:
        state.lines = source.run(state.document)
        state.stats["line_count"] = len(state.lines)
        return state

    def st_segment(state: ExtractState, ctx) -> ExtractState:
        assert state.lines is not None
        chunks, stats = segment.run(
            state.lines,
            pattern=cfg.pattern,
            continuation=cfg.continuation,
            context=cfg.context,
        )
        state.chunks = chunks
        state.stats.update(stats)
        return state

    def st_catalog(state: ExtractState, ctx) -> ExtractState:
        assert state.chunks is not None
        output, stats = catalog.run(state.chunks)
        state.output = output
        state.stats["entry_count"] = stats["entry_count"]
        return state

    providers = {
        "catalog": cfg.catalog,
        "document": cfg.document,
        "builder": cfg.builder,
        "source": type(graph.source).__name__,
        "segmenter": type(graph.segmenter).__name__,
    }
    if strategy is not None:
        providers["strategy_id"] = strategy.strategy_id

    return ExtractionPipeline(
        [
            StageSpec(name="source", fn=st_source),
            StageSpec(name="segment", fn=st_segment),
            StageSpec(name="catalog", fn=st_catalog),
        ],
        providers=providers,
        catalog=cfg.catalog,
        document=cfg.document,
    )

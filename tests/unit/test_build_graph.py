from __future__ import annotations

from pathlib import Path

import pytest

from helpdoc.core.runners import build_graph, make_builder
from helpdoc.core.strategy.models import CatalogConfig, StrategyConfig
from helpdoc.extraction.stages.build import FunctionCatalogBuilder, LuaCatalogBuilder, OptionCatalogBuilder
from helpdoc.libs.providers.source import InMemorySource, RuntimeDocSource


def _strategy(source) -> StrategyConfig:
    return StrategyConfig.from_dict("t", {"providers": {"source": source}})


def test_settings_doc_dir_fills_runtime_source(tmp_path: Path) -> None:
    graph = build_graph(_strategy("source.runtime_doc"), doc_dir=tmp_path)

    assert isinstance(graph.source, RuntimeDocSource)
    assert graph.source.resolve("options") == tmp_path / "options.txt"


def test_strategy_doc_dir_wins(tmp_path: Path) -> None:
    own = tmp_path / "own"
    source = {"provider_id": "source.runtime_doc", "params": {"doc_dir": str(own)}}
    graph = build_graph(_strategy(source), doc_dir=tmp_path / "settings")

    assert graph.source.resolve("lua") == own / "lua.txt"


def test_doc_dir_ignored_for_other_sources(tmp_path: Path) -> None:
    source = {"provider_id": "source.memory", "params": {"documents": {"options": ""}}}
    graph = build_graph(_strategy(source), doc_dir=tmp_path)

    assert isinstance(graph.source, InMemorySource)


def test_make_builder_by_kind() -> None:
    graph = build_graph(_strategy("source.memory"))

    kinds = {
        "functions": FunctionCatalogBuilder,
        "lua": LuaCatalogBuilder,
        "options": OptionCatalogBuilder,
    }
    for builder, cls in kinds.items():
        cfg = CatalogConfig(catalog=builder, document=builder, builder=builder, pattern="^x")
        assert isinstance(make_builder(cfg, graph), cls)

    with pytest.raises(ValueError):
        make_builder(CatalogConfig(catalog="x", document="x", builder="html", pattern="^x"), graph)

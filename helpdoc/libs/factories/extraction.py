from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..interfaces.source import DocumentSource
from ..interfaces.splitter import Segmenter, SignatureParser
from ..interfaces.symbols import SymbolOracle
from ..interfaces.types import TypeMap
from ..registry import ProviderRegistry
from .common import _create_provider


@dataclass
class ExtractionGraph:
    source: DocumentSource
    segmenter: Segmenter
    signature_parser: SignatureParser
    type_map: TypeMap
    oracle: SymbolOracle


def make_extraction_components(cfg: Mapping[str, Any], registry: ProviderRegistry) -> ExtractionGraph:
    return ExtractionGraph(
        source=_create_provider(registry, kind="source", cfg=cfg),
        segmenter=_create_provider(registry, kind="segmenter", cfg=cfg, default_id="segmenter.tag_chunks"),
        signature_parser=_create_provider(
            registry, kind="signature_parser", cfg=cfg, default_id="signature.braces"
        ),
        type_map=_create_provider(registry, kind="type_map", cfg=cfg, default_id="type_map.vim"),
        oracle=_create_provider(registry, kind="oracle", cfg=cfg, default_id="oracle.allow_all"),
    )

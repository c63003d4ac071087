from __future__ import annotations

from ..registry import ProviderRegistry
from .source.memory import InMemorySource
from .source.runtime_doc import RuntimeDocSource
from .splitter.signature import BraceSignatureParser
from .splitter.tag_segmenter import TagChunkSegmenter
from .symbols.oracles import AllowAllOracle, StaticSymbolOracle
from .types.vim_types import VimTypeMap


def register_builtin_providers(registry: ProviderRegistry) -> None:
    """Register default providers for local/dev runs."""

    registry.register("source", "source.runtime_doc", RuntimeDocSource)
    registry.register("source", "source.memory", InMemorySource)
    registry.register("segmenter", "segmenter.tag_chunks", TagChunkSegmenter)
    registry.register("signature_parser", "signature.braces", BraceSignatureParser)
    registry.register("type_map", "type_map.vim", VimTypeMap)
    registry.register("oracle", "oracle.allow_all", AllowAllOracle)
    registry.register("oracle", "oracle.static", StaticSymbolOracle)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ....libs.interfaces.splitter import Chunk
from ....observability.obs import api as obs


class CatalogBuilder(Protocol):
    def build(self, chunks: Sequence[Chunk]) -> dict[str, Any]:
        ...


@dataclass
class CatalogStage:
    builder: CatalogBuilder

    def run(self, chunks: Sequence[Chunk]) -> tuple[dict[str, Any], dict[str, int]]:
        catalog = self.builder.build(chunks)

        stats = {
            "chunk_count": len(chunks),
            "entry_count": len(catalog),
        }
        obs.event("catalog.built", dict(stats))
        obs.metric("catalog.entries", len(catalog))
        return catalog, stats

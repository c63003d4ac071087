from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ....libs.interfaces.splitter import Chunk, Segmenter
from ....libs.providers.splitter import chunk_hash
from ....observability.obs import api as obs


@dataclass
class SegmentStage:
    segmenter: Segmenter

    def run(
        self,
        lines: Sequence[str],
        *,
        pattern: str | re.Pattern[str],
        continuation: str | re.Pattern[str] | None = None,
        context: int = 1,
    ) -> tuple[list[Chunk], dict[str, str | int]]:
        chunks = self.segmenter.segment(lines, pattern=pattern, continuation=continuation, context=context)

        stats: dict[str, str | int] = {
            "chunk_count": len(chunks),
            "chunk_hash": chunk_hash(chunks),
        }
        obs.event("segment.chunks", dict(stats))
        return chunks, stats

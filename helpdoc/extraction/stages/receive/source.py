from __future__ import annotations

from dataclasses import dataclass

from ....libs.interfaces.source import DocumentSource
from ....observability.obs import api as obs


@dataclass
class SourceStage:
    source: DocumentSource

    def run(self, document: str) -> list[str]:
        lines = self.source.read(document)
        obs.event("source.read", {"document": document, "line_count": len(lines)})
        return lines

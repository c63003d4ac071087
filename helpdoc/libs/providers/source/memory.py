from __future__ import annotations

from dataclasses import dataclass, field

from ...interfaces.source import DocumentNotFoundError, DocumentSource


@dataclass
class InMemorySource(DocumentSource):
    """Serve help documents from a name -> text (or lines) mapping."""

    documents: dict[str, str | list[str]] = field(default_factory=dict)

    def read(self, name: str) -> list[str]:
        try:
            doc = self.documents[name]
        except KeyError as exc:
            raise DocumentNotFoundError(f"help document not found: {name}") from exc
        if isinstance(doc, str):
            return doc.splitlines()
        return list(doc)

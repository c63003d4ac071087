from __future__ import annotations

from typing import Protocol


class DocumentNotFoundError(FileNotFoundError):
    """Raised when a named help document cannot be located."""


class DocumentSource(Protocol):
    def read(self, name: str) -> list[str]:
        ...

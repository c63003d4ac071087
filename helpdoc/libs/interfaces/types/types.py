from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TypeLookup:
    """Result of resolving a help-file type spelling.

    `known` is False for spellings outside the vocabulary. A known spelling can
    still resolve to `type_name=None` (explicit absence of a return type).
    """

    spelling: str
    known: bool
    type_name: str | None = None


class TypeMap(Protocol):
    def resolve(self, spelling: str) -> TypeLookup:
        ...

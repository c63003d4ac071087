from __future__ import annotations

from typing import Literal, Protocol

# native: implemented by the host runtime (documented here, worth annotating)
# script: implemented in script code that carries its own annotations
SymbolKind = Literal["native", "script", "table", "value", "missing"]

SYMBOL_KINDS: frozenset[str] = frozenset({"native", "script", "table", "value", "missing"})
KEEP_KINDS: frozenset[str] = frozenset({"native", "value"})


class SymbolOracle(Protocol):
    def lookup(self, name: str) -> SymbolKind:
        ...

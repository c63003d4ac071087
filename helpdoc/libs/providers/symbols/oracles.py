from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from ...interfaces.symbols import SYMBOL_KINDS, SymbolKind, SymbolOracle


@dataclass
class AllowAllOracle(SymbolOracle):
    """Treat every documented name as a native symbol."""

    def lookup(self, name: str) -> SymbolKind:
        return "native"


@dataclass
class StaticSymbolOracle(SymbolOracle):
    """Answer symbol lookups from a snapshot of the runtime's global table.

    The snapshot is a mapping of dotted name -> kind, given inline or as a YAML
    file (`symbols_path`). Names absent from the snapshot are `missing`.
    """

    symbols: Mapping[str, str] = field(default_factory=dict)
    symbols_path: str | Path | None = None

    def __post_init__(self) -> None:
        table: dict[str, Any] = dict(self.symbols)
        if self.symbols_path is not None:
            table.update(_load_symbols(Path(self.symbols_path)))
        for name, kind in table.items():
            if kind not in SYMBOL_KINDS:
                raise ValueError(f"invalid symbol kind for {name!r}: {kind!r}")
        self._table: dict[str, str] = table

    def lookup(self, name: str) -> SymbolKind:
        return self._table.get(name, "missing")  # type: ignore[return-value]


def _load_symbols(p: Path) -> dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise TypeError("symbols file root must be a mapping")
    return raw

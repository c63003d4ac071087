from .symbols import KEEP_KINDS, SYMBOL_KINDS, SymbolKind, SymbolOracle

__all__ = ["SymbolKind", "SymbolOracle", "SYMBOL_KINDS", "KEEP_KINDS"]

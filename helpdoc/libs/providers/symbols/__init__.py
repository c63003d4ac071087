from .oracles import AllowAllOracle, StaticSymbolOracle

__all__ = ["AllowAllOracle", "StaticSymbolOracle"]

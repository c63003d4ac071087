"""Extract a typed API catalog from plain-text help documentation."""

__version__ = "0.1.0"

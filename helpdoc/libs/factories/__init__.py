from __future__ import annotations

from .extraction import ExtractionGraph, make_extraction_components

__all__ = ["ExtractionGraph", "make_extraction_components"]

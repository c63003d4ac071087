"""Extraction stages (1 stage = 1 file)."""

from ..pipeline import DEFAULT_STAGE_ORDER, StageSpec
from .receive.source import SourceStage
from .chunking.segmenter import SegmentStage
from .build import (
    CatalogStage,
    FunctionCatalogBuilder,
    LuaCatalogBuilder,
    OptionCatalogBuilder,
)

__all__ = [
    "StageSpec",
    "DEFAULT_STAGE_ORDER",
    "SourceStage",
    "SegmentStage",
    "CatalogStage",
    "FunctionCatalogBuilder",
    "LuaCatalogBuilder",
    "OptionCatalogBuilder",
]

"""Extraction pipeline and stages."""
from .pipeline import ExtractionPipeline, StageSpec, DEFAULT_STAGE_ORDER
from .models import CatalogEntry, ExtractResult, OptionEntry, StageContext
from .errors import ExtractionError, StageExecutionError

__all__ = [
    "ExtractionPipeline",
    "StageSpec",
    "DEFAULT_STAGE_ORDER",
    "CatalogEntry",
    "OptionEntry",
    "ExtractResult",
    "StageContext",
    "ExtractionError",
    "StageExecutionError",
]

"""Catalog builders (chunks -> name-keyed catalog entries)."""

from .catalog import CatalogBuilder, CatalogStage
from .functions import FUNCTION_LIST_TAG, FunctionCatalogBuilder
from .lua import QUALIFY_TAG_PATTERN, LuaCatalogBuilder, qualify_name
from .options import OPTION_PATTERN, OptionCatalogBuilder

__all__ = [
    "CatalogBuilder",
    "CatalogStage",
    "FunctionCatalogBuilder",
    "FUNCTION_LIST_TAG",
    "LuaCatalogBuilder",
    "QUALIFY_TAG_PATTERN",
    "qualify_name",
    "OptionCatalogBuilder",
    "OPTION_PATTERN",
]

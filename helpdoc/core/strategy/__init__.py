"""Strategy/config loading and validation."""
from .loader import StrategyLoader, load_settings
from .models import CatalogConfig, Settings, StrategyConfig

__all__ = [
    "CatalogConfig",
    "Settings",
    "StrategyConfig",
    "StrategyLoader",
    "load_settings",
]

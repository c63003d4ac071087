"""Pluggable interfaces, factories, registry, and providers."""
from .registry import (
    ProviderAlreadyRegisteredError,
    ProviderNotFoundError,
    ProviderRegistry,
    ProviderRegistryError,
)

__all__ = [
    "ProviderRegistry",
    "ProviderRegistryError",
    "ProviderAlreadyRegisteredError",
    "ProviderNotFoundError",
]

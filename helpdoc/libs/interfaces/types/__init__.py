from .types import TypeLookup, TypeMap

__all__ = ["TypeLookup", "TypeMap"]

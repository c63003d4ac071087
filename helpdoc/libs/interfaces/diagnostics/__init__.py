from .diagnostics import Diagnostics

__all__ = ["Diagnostics"]

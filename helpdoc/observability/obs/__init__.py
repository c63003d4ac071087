"""Observability facade: spans, events, metrics, and diagnostics."""
from . import api
from .diagnostics import TraceDiagnostics

__all__ = ["api", "TraceDiagnostics"]

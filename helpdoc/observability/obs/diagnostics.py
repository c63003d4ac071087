from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...libs.interfaces.diagnostics import Diagnostics
from . import api as obs


@dataclass
class TraceDiagnostics(Diagnostics):
    """Report extraction diagnostics as `diag.*` events on the active trace."""

    document: str | None = None

    def debug(self, message: str, **attrs: Any) -> None:
        obs.event("diag.debug", self._attrs(message, attrs))

    def error(self, message: str, **attrs: Any) -> None:
        obs.event("diag.error", self._attrs(message, attrs))

    def _attrs(self, message: str, attrs: dict[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {"message": message}
        if self.document is not None:
            out["document"] = self.document
        out.update(attrs)
        return out

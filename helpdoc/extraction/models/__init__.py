from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from ..errors import ExtractionError
from ...libs.interfaces.splitter import Param
from ...observability.trace.envelope import TraceEnvelope


@dataclass
class CatalogEntry:
    """One documented function, keyed by `name` in a catalog."""

    name: str
    params: list[Param] = field(default_factory=list)
    doc: str = ""
    return_type: str | None = None
    fqname: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "name": self.name,
            "params": [p.to_dict() for p in self.params],
            "doc": self.doc,
        }
        if self.fqname is not None:
            d["fqname"] = self.fqname
        if self.return_type is not None:
            d["return"] = self.return_type
        return d


@dataclass
class OptionEntry:
    name: str
    doc: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "doc": self.doc}


@dataclass
class StageContext:
    strategy_config_id: str
    trace_id: str
    stage: str


ProgressCallback = Callable[[str, float, str, dict[str, Any] | None], None]


@dataclass
class ExtractResult:
    trace_id: str
    status: str
    output: Any | None = None
    error: ExtractionError | None = None
    trace: TraceEnvelope | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def catalog_to_dict(catalog: dict[str, CatalogEntry] | dict[str, OptionEntry]) -> dict[str, Any]:
    return {name: entry.to_dict() for name, entry in catalog.items()}

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

from ..trace.envelope import TraceEnvelope


DEFAULT_FILE_NAME = "traces.jsonl"


def _to_jsonable(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"not JSON serializable: {type(obj).__name__}")


def resolve_trace_path(path_or_dir: str | Path) -> Path:
    """A `.jsonl` path is used as-is; anything else is treated as a directory."""
    p = Path(path_or_dir)
    if p.suffix == ".jsonl":
        return p
    return p / DEFAULT_FILE_NAME


class JsonlSink:
    """
    Append-only JSONL sink for trace envelopes.

    Span/event/metric callbacks are ignored; a finished envelope already
    carries them.
    """

    def __init__(self, path_or_dir: str | Path) -> None:
        self.path = resolve_trace_path(path_or_dir)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, envelope: TraceEnvelope) -> None:
        record = envelope.to_dict()
        line = json.dumps(record, ensure_ascii=True, default=_to_jsonable)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")

    def on_event(self, record: dict[str, Any]) -> None:
        return

    def on_metric(self, record: dict[str, Any]) -> None:
        return

    def on_span_end(self, record: dict[str, Any]) -> None:
        return

    def on_trace_end(self, envelope: TraceEnvelope) -> None:
        self.write(envelope)

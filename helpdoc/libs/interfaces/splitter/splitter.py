from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence


@dataclass(frozen=True)
class Chunk:
    tags: tuple[str, ...]
    text: str
    match: tuple[str, ...]
    line_start: int = 0
    line_end: int = 0

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def to_dict(self) -> dict[str, Any]:
        return {
            "tags": list(self.tags),
            "text": self.text,
            "match": list(self.match),
            "line_range": [self.line_start, self.line_end],
        }


@dataclass(frozen=True)
class Param:
    name: str
    optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"name": self.name}
        if self.optional:
            d["optional"] = True
        return d


@dataclass
class ParsedSignature:
    name: str
    params: list[Param] = field(default_factory=list)
    doc: str = ""


class Segmenter(Protocol):
    def segment(
        self,
        lines: Sequence[str],
        *,
        pattern: str | re.Pattern[str],
        continuation: str | re.Pattern[str] | None = None,
        context: int = 1,
    ) -> list[Chunk]:
        ...


class SignatureParser(Protocol):
    def parse(self, text: str) -> ParsedSignature | None:
        ...

from __future__ import annotations

import hashlib
import json
import re
from dataclasses import dataclass, field
from typing import Sequence

from ...interfaces.splitter import Chunk, Segmenter
from .tags import strip_tags


DEFAULT_CONTINUATION = r"^[\s<>]"

_BLANK_RE = re.compile(r"^\s*$")


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


@dataclass
class _ChunkScanner:
    """Accumulator for one segmentation pass (states: no chunk open / chunk open)."""

    chunks: list[Chunk] = field(default_factory=list)
    carried_tags: list[str] = field(default_factory=list)
    buf: list[str] = field(default_factory=list)
    chunk_tags: list[str] = field(default_factory=list)
    chunk_match: list[str] = field(default_factory=list)
    chunk_start: int = 0
    chunk_end: int = 0

    @property
    def is_open(self) -> bool:
        return bool(self.buf)

    def start(self, line_no: int, visible: str, match: list[str]) -> None:
        self.close()
        self.chunk_match = list(match)
        self.chunk_tags = list(self.carried_tags)
        self.chunk_start = line_no
        self.chunk_end = line_no
        self.buf.append(visible)

    def extend(self, line_no: int, visible: str) -> None:
        self.buf.append(visible)
        self.chunk_end = line_no

    def close(self) -> None:
        if self.buf:
            self.chunks.append(
                Chunk(
                    tags=tuple(self.chunk_tags),
                    text="\n".join(self.buf),
                    match=tuple(self.chunk_match),
                    line_start=self.chunk_start,
                    line_end=self.chunk_end,
                )
            )
        self.buf = []
        self.chunk_tags = []
        self.chunk_match = []


@dataclass
class TagChunkSegmenter(Segmenter):
    """Split help-file lines into tagged chunks.

    A chunk starts on every line whose lookahead window (the visible line plus
    up to `context` following raw lines) contains a match for `pattern`;
    anchor the pattern with `^` to require it on the line itself. Following lines are
    appended while they match `continuation` or are blank; any other line
    closes the chunk and is dropped.
    """

    default_continuation: str = DEFAULT_CONTINUATION
    default_context: int = 1

    def segment(
        self,
        lines: Sequence[str],
        *,
        pattern: str | re.Pattern[str],
        continuation: str | re.Pattern[str] | None = None,
        context: int | None = None,
    ) -> list[Chunk]:
        boundary_re = _compile(pattern)
        continuation_re = _compile(continuation if continuation is not None else self.default_continuation)
        depth = max(self.default_context if context is None else context, 0)

        scanner = _ChunkScanner()
        for idx, raw in enumerate(lines):
            line_no = idx + 1
            visible, line_tags = strip_tags(raw)
            if line_tags:
                scanner.carried_tags = line_tags

            window = "\n".join([visible, *lines[idx + 1 : idx + 1 + depth]])
            m = boundary_re.search(window)

            if m is not None:
                scanner.start(line_no, visible, _captures(m))
            elif scanner.is_open and (continuation_re.search(visible) or _BLANK_RE.match(visible)):
                scanner.extend(line_no, visible)
            else:
                scanner.close()

        scanner.close()
        return scanner.chunks


def _captures(m: re.Match[str]) -> list[str]:
    groups = m.groups()
    if not groups:
        return [m.group(0)]
    return [g if g is not None else "" for g in groups]


def chunk_hash(chunks: Sequence[Chunk]) -> str:
    acc = hashlib.sha256()
    for c in chunks:
        record = json.dumps([list(c.tags), list(c.match), c.text], ensure_ascii=False)
        acc.update(hashlib.sha256(record.encode("utf-8")).hexdigest().encode("utf-8"))
        acc.update(b"\n")
    return acc.hexdigest()

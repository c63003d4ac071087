from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ....libs.interfaces.splitter import Chunk, SignatureParser
from ....libs.interfaces.symbols import KEEP_KINDS, SymbolOracle
from ....observability.obs import api as obs
from ...models import CatalogEntry


QUALIFY_TAG_PATTERN = r"vim.*\(\)$"

_LEADING_NAME_RE = re.compile(r"^(\S+?)\(")


def qualify_name(text: str, tags: Sequence[str], tag_re: re.Pattern[str]) -> str:
    """Replace the chunk's leading name with a fully qualified `*tag()*`.

    A tag like `vim.api.nvim_call_function()` qualifies `nvim_call_function(...)`
    only when the tag (minus `()`) ends with the documented name.
    """
    for tag in tags:
        if not tag_re.search(tag):
            continue
        qualified = tag[:-2]
        m = _LEADING_NAME_RE.match(text)
        if m is None:
            continue
        if qualified.endswith(m.group(1)):
            text = qualified + text[m.end() - 1 :]
    return text


@dataclass
class LuaCatalogBuilder:
    """Build the catalog of natively implemented Lua API functions."""

    signature_parser: SignatureParser
    oracle: SymbolOracle
    qualify_tag_pattern: str = QUALIFY_TAG_PATTERN

    def __post_init__(self) -> None:
        self._tag_re = re.compile(self.qualify_tag_pattern)

    def build(self, chunks: Sequence[Chunk]) -> dict[str, CatalogEntry]:
        catalog: dict[str, CatalogEntry] = {}
        filtered = 0
        for chunk in chunks:
            text = qualify_name(chunk.text, chunk.tags, self._tag_re)
            parsed = self.signature_parser.parse(text)
            if parsed is None:
                continue

            if self.oracle.lookup(parsed.name) not in KEEP_KINDS:
                filtered += 1
                continue

            catalog[parsed.name] = CatalogEntry(
                name=parsed.name,
                fqname=parsed.name,
                params=parsed.params,
                doc=parsed.doc,
            )

        obs.metric("catalog.filtered", filtered)
        return catalog

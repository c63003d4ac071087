from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

from ....libs.interfaces.diagnostics import Diagnostics
from ....libs.interfaces.splitter import Chunk, SignatureParser
from ....libs.interfaces.types import TypeMap
from ....libs.providers.splitter import FUNCTION_PATTERN, SIGNATURE_PATTERN
from ....observability.obs import TraceDiagnostics
from ...models import CatalogEntry


FUNCTION_LIST_TAG = "builtin-function-list"

_WS_RUN_RE = re.compile(r"\s\s+")


@dataclass
class FunctionCatalogBuilder:
    """Build the builtin-function catalog.

    Rows of the function-list section (chunks tagged `function_list_tag`) only
    contribute return types; every other chunk that parses as a signature
    becomes an entry.
    """

    signature_parser: SignatureParser
    type_map: TypeMap
    diagnostics: Diagnostics = field(default_factory=TraceDiagnostics)
    pattern: str = FUNCTION_PATTERN
    function_list_tag: str = FUNCTION_LIST_TAG

    def __post_init__(self) -> None:
        self._boundary_re = re.compile(self.pattern + r"\s+")
        self._row_re = re.compile(SIGNATURE_PATTERN + r"\t([A-Za-z0-9]+)")

    def build(self, chunks: Sequence[Chunk]) -> dict[str, CatalogEntry]:
        return_types = self.collect_return_types(chunks)

        catalog: dict[str, CatalogEntry] = {}
        for chunk in chunks:
            if chunk.has_tag(self.function_list_tag):
                continue
            parsed = self.signature_parser.parse(chunk.text)
            if parsed is None:
                continue
            catalog[parsed.name] = CatalogEntry(
                name=parsed.name,
                params=parsed.params,
                doc=parsed.doc,
                return_type=return_types.get(parsed.name),
            )
        return catalog

    def collect_return_types(self, chunks: Sequence[Chunk]) -> dict[str, str]:
        return_types: dict[str, str] = {}
        for chunk in chunks:
            if not chunk.has_tag(self.function_list_tag):
                continue

            m = self._row_re.match(self._normalize_row(chunk.text))
            if m is None:
                self.diagnostics.error("could not parse function-list entry", chunk=chunk.to_dict())
                continue

            name, spelling = m.group(1), m.group(3).lower()
            lookup = self.type_map.resolve(spelling)
            if not lookup.known:
                self.diagnostics.debug("unknown return type", name=name, spelling=spelling)
                continue
            if lookup.type_name is not None:
                return_types[name] = lookup.type_name
        return return_types

    def _normalize_row(self, text: str) -> str:
        # "abs({expr})      Float     absolute value" -> "abs({expr})\tFloat\tabsolute value"
        def sig_tab(m: re.Match[str]) -> str:
            sig = m.group(1) if m.lastindex else m.group(0).rstrip()
            return sig + "\t"

        text = self._boundary_re.sub(sig_tab, text, count=1)
        return _WS_RUN_RE.sub("\t", text)

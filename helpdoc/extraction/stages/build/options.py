from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ....libs.interfaces.splitter import Chunk
from ...models import OptionEntry


OPTION_PATTERN = r"^'(\S*?)'\s*"


@dataclass
class OptionCatalogBuilder:
    """Map option names to their help text.

    The leading `'name' 'short'` pair is stripped from the doc.
    """

    pattern: str = OPTION_PATTERN

    def __post_init__(self) -> None:
        self._name_re = re.compile(self.pattern)

    def build(self, chunks: Sequence[Chunk]) -> dict[str, OptionEntry]:
        catalog: dict[str, OptionEntry] = {}
        for chunk in chunks:
            if not chunk.match:
                continue
            name = chunk.match[0]
            doc = self._name_re.sub("", chunk.text, count=1)
            doc = self._name_re.sub("", doc, count=1)
            catalog[name] = OptionEntry(name=name, doc=doc)
        return catalog

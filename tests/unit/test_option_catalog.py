from __future__ import annotations

from helpdoc.extraction.stages.build import OPTION_PATTERN, OptionCatalogBuilder
from helpdoc.libs.providers.splitter import TagChunkSegmenter


def test_option_catalog(options_doc: str) -> None:
    chunks = TagChunkSegmenter().segment(options_doc.splitlines(), pattern=OPTION_PATTERN)
    catalog = OptionCatalogBuilder().build(chunks)

    assert list(catalog) == ["autoindent", "background", "tabstop"]

    ai = catalog["autoindent"]
    assert ai.doc.startswith("boolean\t(default on)\n")
    assert "Copy indent from current line" in ai.doc
    assert "'ai'" not in ai.doc

    assert catalog["tabstop"].doc == "number\t(default 8)\n\t\t\tlocal to buffer"
    assert catalog["background"].to_dict()["name"] == "background"


def test_option_chunk_tags(options_doc: str) -> None:
    chunks = TagChunkSegmenter().segment(options_doc.splitlines(), pattern=OPTION_PATTERN)
    assert chunks[0].tags == ("'autoindent'", "'ai'", "'noautoindent'", "'noai'")
    assert chunks[1].tags == ("'background'", "'bg'")
    # tabstop has no tag line of its own; the previous tag set carries forward
    assert chunks[2].tags == ("'background'", "'bg'")

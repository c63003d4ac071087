from __future__ import annotations

import re

from helpdoc.extraction.stages.build import QUALIFY_TAG_PATTERN, LuaCatalogBuilder, qualify_name
from helpdoc.libs.providers.splitter import FUNCTION_PATTERN, BraceSignatureParser, TagChunkSegmenter
from helpdoc.libs.providers.symbols import AllowAllOracle, StaticSymbolOracle


TAG_RE = re.compile(QUALIFY_TAG_PATTERN)


def _chunks(doc: str):
    return TagChunkSegmenter().segment(doc.splitlines(), pattern=FUNCTION_PATTERN, context=2)


def test_qualify_name_from_tag() -> None:
    text = "str_utfindex({str} [, {index}])\n    Convert byte index."
    assert qualify_name(text, ["vim.str_utfindex()"], TAG_RE) == (
        "vim.str_utfindex({str} [, {index}])\n    Convert byte index."
    )


def test_qualify_name_requires_matching_suffix() -> None:
    assert qualify_name("foo({a})", ["vim.bar()"], TAG_RE) == "foo({a})"


def test_qualify_name_ignores_non_function_tags() -> None:
    assert qualify_name("api({a})", ["vim.api", "lua-vim-api"], TAG_RE) == "api({a})"


def test_lua_catalog_filters_through_oracle(lua_doc: str, lua_symbols: dict[str, str]) -> None:
    builder = LuaCatalogBuilder(signature_parser=BraceSignatureParser(), oracle=StaticSymbolOracle(symbols=lua_symbols))
    catalog = builder.build(_chunks(lua_doc))

    assert sorted(catalog) == ["vim.in_fast_event", "vim.rpcnotify", "vim.str_utfindex"]

    entry = catalog["vim.str_utfindex"]
    assert entry.fqname == "vim.str_utfindex"
    assert entry.return_type is None
    assert [(p.name, p.optional) for p in entry.params] == [("str", False), ("index", True)]
    assert entry.doc == "Convert byte index to UTF-32 and UTF-16 indices.\n"

    rpc = catalog["vim.rpcnotify"]
    assert [(p.name, p.optional) for p in rpc.params] == [("channel", False), ("method", False), ("args", True)]


def test_lua_catalog_allow_all(lua_doc: str) -> None:
    builder = LuaCatalogBuilder(signature_parser=BraceSignatureParser(), oracle=AllowAllOracle())
    catalog = builder.build(_chunks(lua_doc))

    assert sorted(catalog) == [
        "vim.api.{func}",
        "vim.in_fast_event",
        "vim.rpcnotify",
        "vim.str_utfindex",
        "vim.tbl_keys",
    ]
    assert catalog["vim.in_fast_event"].to_dict() == {
        "name": "vim.in_fast_event",
        "fqname": "vim.in_fast_event",
        "params": [],
        "doc": 'Returns true if the code is executing as part of a "fast" event handler.\n',
    }

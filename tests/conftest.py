from __future__ import annotations

from pathlib import Path

import pytest


BUILTIN_DOC = "\n".join(
    [
        "*builtin.txt*\tNvim",
        "",
        "1. Overview\t\t\t\t\t*builtin-function-list*",
        "",
        "Use CTRL-] on the function name to jump to the full explanation.",
        "",
        "abs({expr})\t\t\tFloat or Number  absolute value of {expr}",
        "add({object}, {expr})\t\tList/Blob   append {expr} to {object}",
        "bufnr([{buf} [, {create}]])\tNumber\tNumber of the buffer {buf}",
        "changenr()\t\t\tNumber\tcurrent change number",
        "noret()",
        "settabvar({tabnr}, {varname}, {val})\t\tnone\tset {varname} in tab page {tabnr}",
        "weird({x})\t\t\tThing\tnot a known type",
        "",
        "==============================================================================",
        "2. Details\t\t\t\t\t*builtin-function-details*",
        "",
        "abs({expr})\t\t\t\t\t\t\t*abs()*",
        "\t\tReturn the absolute value of {expr}.",
        "",
        "add({object}, {expr})\t\t\t\t\t*add()*",
        "\t\tAppend the item {expr} to List or Blob {object}.",
        "",
        "bufnr([{buf} [, {create}]])\t\t\t\t*bufnr()*",
        "\t\tThe result is the number of a buffer.",
        "",
        "settabvar({tabnr}, {varname}, {val})\t\t\t*settabvar()*",
        "\t\tSet tab-local variable {varname} to {val} in tab page {tabnr}.",
    ]
)

LUA_DOC = "\n".join(
    [
        "*lua.txt*  Nvim",
        "",
        "==============================================================================",
        "VIM.API\t\t\t\t\t\t*lua-vim-api*",
        "",
        "vim.api.{func}({...})\t\t\t\t\t*vim.api*",
        "    Invokes Nvim API function {func} with arguments {...}.",
        "",
        "------------------------------------------------------------------------------",
        "VIM\t\t\t\t\t\t\t*lua-stdlib*",
        "",
        "vim.in_fast_event()\t\t\t\t\t*vim.in_fast_event()*",
        '    Returns true if the code is executing as part of a "fast" event handler.',
        "",
        "vim.rpcnotify({channel}, {method} [, {args}...])\t*vim.rpcnotify()*",
        "    Sends {event} to {channel} via |RPC| and returns immediately.",
        "",
        "str_utfindex({str} [, {index}])\t\t\t*vim.str_utfindex()*",
        "    Convert byte index to UTF-32 and UTF-16 indices.",
        "",
        "vim.tbl_keys({t})\t\t\t\t\t*vim.tbl_keys()*",
        "    Return a list of all keys used in a table.",
    ]
)

OPTIONS_DOC = "\n".join(
    [
        "*options.txt*\tNvim",
        "",
        "\t\t\t*'autoindent'* *'ai'* *'noautoindent'* *'noai'*",
        "'autoindent' 'ai'\tboolean\t(default on)",
        "\t\t\tglobal",
        "\tCopy indent from current line when starting a new line.",
        "",
        "\t\t\t\t\t\t*'background'* *'bg'*",
        "'background' 'bg'\tstring\t(default \"dark\")",
        "\t\t\tglobal",
        '\tWhen set to "dark" or "light", adjusts the default color groups.',
        "'tabstop' 'ts'\t\tnumber\t(default 8)",
        "\t\t\tlocal to buffer",
    ]
)

LUA_SYMBOLS = {
    "vim.in_fast_event": "native",
    "vim.rpcnotify": "native",
    "vim.str_utfindex": "native",
    "vim.tbl_keys": "script",
    "vim.api": "table",
}


@pytest.fixture
def tmp_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Provide an isolated working directory for tests that write to disk using
    relative paths.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_clock(monkeypatch: pytest.MonkeyPatch) -> float:
    """
    Freeze time.time() to a deterministic value.
    """
    import time

    fixed = 1_700_000_000.0
    monkeypatch.setattr(time, "time", lambda: fixed)
    return fixed


@pytest.fixture
def builtin_doc() -> str:
    return BUILTIN_DOC


@pytest.fixture
def lua_doc() -> str:
    return LUA_DOC


@pytest.fixture
def options_doc() -> str:
    return OPTIONS_DOC


@pytest.fixture
def lua_symbols() -> dict[str, str]:
    return dict(LUA_SYMBOLS)


@pytest.fixture
def help_documents() -> dict[str, str]:
    return {"builtin": BUILTIN_DOC, "lua": LUA_DOC, "options": OPTIONS_DOC}


@pytest.fixture
def help_doc_dir(tmp_path: Path, help_documents: dict[str, str]) -> Path:
    """Write the sample help documents as `<name>.txt` files."""
    doc_dir = tmp_path / "runtime" / "doc"
    doc_dir.mkdir(parents=True)
    for name, text in help_documents.items():
        (doc_dir / f"{name}.txt").write_text(text + "\n", encoding="utf-8")
    return doc_dir


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Default behavior: only run unit tests.

    If the user explicitly provides `-m ...`, we respect it and do not apply
    any extra deselection logic.
    """
    if config.option.markexpr:
        return

    deselect: list[pytest.Item] = []
    keep: list[pytest.Item] = []

    for item in items:
        if item.get_closest_marker("integration"):
            deselect.append(item)
        else:
            keep.append(item)

    if deselect:
        config.hook.pytest_deselected(items=deselect)
        items[:] = keep

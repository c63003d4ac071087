from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ...interfaces.source import DocumentNotFoundError, DocumentSource


RUNTIME_ENV_VAR = "VIMRUNTIME"


@dataclass
class RuntimeDocSource(DocumentSource):
    """Read `<doc_dir>/<name>.txt` help files.

    `doc_dir` defaults to `$VIMRUNTIME/doc`; `~` and environment variables in
    an explicit `doc_dir` are expanded.
    """

    doc_dir: str | Path | None = None
    suffix: str = ".txt"
    encoding: str = "utf-8"

    def resolve(self, name: str) -> Path:
        return self._doc_dir() / f"{name}{self.suffix}"

    def read(self, name: str) -> list[str]:
        p = self.resolve(name)
        if not p.is_file():
            raise DocumentNotFoundError(f"help document not found: {name} ({p})")
        return p.read_text(encoding=self.encoding).splitlines()

    def _doc_dir(self) -> Path:
        if self.doc_dir is not None:
            return Path(os.path.expandvars(str(self.doc_dir))).expanduser()
        runtime = os.environ.get(RUNTIME_ENV_VAR)
        if not runtime:
            raise DocumentNotFoundError(f"no doc_dir configured and ${RUNTIME_ENV_VAR} is not set")
        return Path(runtime).expanduser() / "doc"

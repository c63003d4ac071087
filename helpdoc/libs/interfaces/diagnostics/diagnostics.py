from __future__ import annotations

from typing import Any, Protocol


class Diagnostics(Protocol):
    def debug(self, message: str, **attrs: Any) -> None:
        ...

    def error(self, message: str, **attrs: Any) -> None:
        ...

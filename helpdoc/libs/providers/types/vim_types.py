from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ...interfaces.types import TypeLookup, TypeMap


# None marks a known spelling that means "no return value".
VIM_TYPE_MAP: dict[str, str | None] = {
    "number": "number",
    "float": "float",
    "string": "string",
    "list": "any[]",
    "any": "any",
    "funcref": "fun()",
    "dict": "table<string, any>",
    "none": None,
    "set": "table",
    "boolean": "boolean",
}


@dataclass
class VimTypeMap(TypeMap):
    """Map help-file return spellings (case-insensitive) to annotation types."""

    extra: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._table: dict[str, str | None] = dict(VIM_TYPE_MAP)
        for k, v in self.extra.items():
            if not isinstance(k, str) or not k:
                raise ValueError("type map keys must be non-empty strings")
            if v is not None and not isinstance(v, str):
                raise TypeError(f"type map value for {k!r} must be str or null")
            self._table[k.lower()] = v

    def resolve(self, spelling: str) -> TypeLookup:
        key = spelling.strip().lower()
        if key not in self._table:
            return TypeLookup(spelling=key, known=False)
        return TypeLookup(spelling=key, known=True, type_name=self._table[key])

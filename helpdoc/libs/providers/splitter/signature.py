from __future__ import annotations

import re
from dataclasses import dataclass

from ...interfaces.splitter import Param, ParsedSignature, SignatureParser


FUNCTION_PATTERN = r"^(\S*?\([^(]*?\))"
SIGNATURE_PATTERN = r"^(\S+?)\(([^(]*?)\)"

_SIGNATURE_RE = re.compile(SIGNATURE_PATTERN + r"\s*(.*)", re.DOTALL)
_PARAM_RE = re.compile(r"\{(\S*?)\}")


def parse_signature(text: str) -> ParsedSignature | None:
    """Parse `name({a}, [{b}]) doc...` into name, params and trailing doc.

    Returns None when `text` does not start with a signature. Parameters after
    the first `[` in the parenthesized part are optional; bracket nesting is
    not validated.
    """
    m = _SIGNATURE_RE.match(text)
    if m is None:
        return None

    name, sig, doc = m.group(1), m.group(2), m.group(3)
    bracket = sig.find("[")

    params: list[Param] = []
    for pm in _PARAM_RE.finditer(sig):
        optional = bracket >= 0 and pm.start() > bracket
        params.append(Param(name=pm.group(1), optional=optional))

    return ParsedSignature(name=name, params=params, doc=doc)


@dataclass
class BraceSignatureParser(SignatureParser):
    """Signature parser for `{param}` style help signatures."""

    def parse(self, text: str) -> ParsedSignature | None:
        return parse_signature(text)

from __future__ import annotations

import re


TAG_DELIMITER = "*"

_TAG_RE = re.compile(re.escape(TAG_DELIMITER) + r"(\S*?)" + re.escape(TAG_DELIMITER))


def strip_tags(line: str) -> tuple[str, list[str]]:
    """Remove `*tag*` markers from a help line.

    Returns the visible text (trailing whitespace trimmed) and the tag names in
    left-to-right order.
    """
    tags: list[str] = []

    def collect(m: re.Match[str]) -> str:
        tags.append(m.group(1))
        return ""

    visible = _TAG_RE.sub(collect, line).rstrip()
    return visible, tags

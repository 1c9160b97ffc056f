# topmark:header:start
#
#   project      : svgtidy
#   file         : entities.py
#   file_relpath : src/svgtidy/dom/entities.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Entity decoding and escaping tables.

Only the five predefined XML entities and numeric character references are
decoded. Any other ``&name;`` sequence is left as literal text.
"""

from __future__ import annotations

import re
from typing import Final

NAMED_ENTITIES: Final[dict[str, str]] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

_ENTITY_RE: Final[re.Pattern[str]] = re.compile(r"&(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z]+);")

_TEXT_ESCAPES: Final[dict[int, str]] = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})
_ATTR_ESCAPES: Final[dict[int, str]] = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"}
)


def _is_xml_char(codepoint: int) -> bool:
    """Return True if ``codepoint`` may appear in an XML document."""
    return (
        codepoint in (0x9, 0xA, 0xD)
        or 0x20 <= codepoint <= 0xD7FF
        or 0xE000 <= codepoint <= 0xFFFD
        or 0x10000 <= codepoint <= 0x10FFFF
    )


def _replace(match: re.Match[str]) -> str:
    ref: str = match.group(1)
    if ref[0] == "#":
        try:
            codepoint = int(ref[2:], 16) if ref[1] in "xX" else int(ref[1:])
        except ValueError:
            return match.group(0)
        if not _is_xml_char(codepoint):
            return match.group(0)
        return chr(codepoint)
    return NAMED_ENTITIES.get(ref, match.group(0))


def decode_entities(text: str) -> str:
    """Decode predefined entities and numeric character references in ``text``."""
    if "&" not in text:
        return text
    return _ENTITY_RE.sub(_replace, text)


def escape_text(text: str) -> str:
    """Escape character data for output between tags."""
    return text.translate(_TEXT_ESCAPES)


def escape_attribute(value: str) -> str:
    """Escape an attribute value for output inside double quotes."""
    return value.translate(_ATTR_ESCAPES)

# topmark:header:start
#
#   project      : svgtidy
#   file         : parser.py
#   file_relpath : src/svgtidy/dom/parser.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Markup parser producing a `Document`.

The parser is a single forward scan over the input string. At each position it
recognizes, in order:

1. a leading byte-order mark (dropped),
2. ``<!DOCTYPE ...>`` (a bracketed internal subset is allowed),
3. ``<?...?>`` processing instructions (the XML declaration included),
4. ``<!-- ... -->`` comments,
5. ``<![CDATA[ ... ]]>`` sections (emitted as text, no entity decoding),
6. end tags, start tags and self-closing tags,
7. text runs.

Whitespace is never dropped here; removing it is the job of a later pass.

Malformed input raises `ParseError`, which carries a `ParseErrorKind` and the
character offset of the problem. For "unterminated" constructs the offset is the
end of the input, i.e. the point where the text was truncated.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Final

from svgtidy.config.logging import get_logger
from svgtidy.dom.entities import decode_entities
from svgtidy.dom.model import (
    Comment,
    Doctype,
    Document,
    Element,
    ProcessingInstruction,
    Text,
)

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Node

logger: SvgtidyLogger = get_logger(__name__)

BOM: Final[str] = "\ufeff"

_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[^\s/>=\"'<]+")
_SPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s*")


class ParseErrorKind(Enum):
    """Structural failure categories reported by the parser."""

    UNTERMINATED_TAG = "unterminated tag"
    MISMATCHED_END_TAG = "mismatched end tag"
    UNEXPECTED_END_TAG = "end tag without matching start tag"
    UNCLOSED_ELEMENT = "element not closed before end of input"
    UNTERMINATED_ATTRIBUTE_VALUE = "unterminated attribute value"
    MALFORMED_ATTRIBUTE = "malformed attribute"
    UNTERMINATED_COMMENT = "unterminated comment"
    UNTERMINATED_CDATA = "unterminated CDATA section"
    UNTERMINATED_PROCESSING_INSTRUCTION = "unterminated processing instruction"
    UNTERMINATED_DOCTYPE = "unterminated doctype"


class ParseError(ValueError):
    """Raised when the input is not well-formed markup.

    Attributes:
        kind (ParseErrorKind): What went wrong.
        offset (int): Character offset into the input string.
        text (str): The input that failed to parse (used for ``byte_offset``).
    """

    def __init__(self, kind: ParseErrorKind, offset: int, text: str = "") -> None:
        self.kind = kind
        self.offset = offset
        self.text = text
        super().__init__(f"{kind.value} at offset {offset}")

    @property
    def byte_offset(self) -> int:
        """Return the offset in UTF-8 encoded bytes."""
        return len(self.text[: self.offset].encode("utf-8"))


class _Parser:
    """Stateful single-pass scanner. Use `parse` instead of this class directly."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.document = Document()
        self.stack: list[Element] = []

    # --- helpers ---

    def fail(self, kind: ParseErrorKind, offset: int | None = None) -> ParseError:
        return ParseError(kind, self.pos if offset is None else offset, self.text)

    def emit(self, node: Node) -> None:
        if self.stack:
            self.stack[-1].children.append(node)
        else:
            self.document.children.append(node)

    def skip_space(self) -> None:
        m = _SPACE_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()

    def read_until(self, terminator: str, kind: ParseErrorKind, start: int) -> str:
        end = self.text.find(terminator, start)
        if end == -1:
            raise self.fail(kind, len(self.text))
        self.pos = end + len(terminator)
        return self.text[start:end]

    # --- constructs ---

    def parse(self) -> Document:
        text = self.text
        if text.startswith(BOM):
            self.pos = 1

        length = len(text)
        while self.pos < length:
            if text[self.pos] != "<":
                self.parse_text()
            elif text.startswith("<!--", self.pos):
                body = self.read_until("-->", ParseErrorKind.UNTERMINATED_COMMENT, self.pos + 4)
                self.emit(Comment(body))
            elif text.startswith("<![CDATA[", self.pos):
                body = self.read_until("]]>", ParseErrorKind.UNTERMINATED_CDATA, self.pos + 9)
                self.emit(Text(body))
            elif text[self.pos : self.pos + 9].upper() == "<!DOCTYPE":
                self.parse_doctype()
            elif text.startswith("<?", self.pos):
                self.emit(
                    ProcessingInstruction(
                        self.read_until(
                            "?>", ParseErrorKind.UNTERMINATED_PROCESSING_INSTRUCTION, self.pos + 2
                        )
                    )
                )
            elif text.startswith("</", self.pos):
                self.parse_end_tag()
            else:
                self.parse_start_tag()

        if self.stack:
            logger.debug("parser: %d element(s) left open at end of input", len(self.stack))
            raise self.fail(ParseErrorKind.UNCLOSED_ELEMENT, length)
        return self.document

    def parse_text(self) -> None:
        end = self.text.find("<", self.pos)
        if end == -1:
            end = len(self.text)
        self.emit(Text(decode_entities(self.text[self.pos : end])))
        self.pos = end

    def parse_doctype(self) -> None:
        text = self.text
        i = self.pos + 9
        depth = 0
        quote: str | None = None
        while i < len(text):
            ch = text[i]
            if quote is not None:
                if ch == quote:
                    quote = None
            elif ch in "\"'":
                quote = ch
            elif ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
            elif ch == ">" and depth <= 0:
                self.emit(Doctype(text[self.pos + 9 : i].strip()))
                self.pos = i + 1
                return
            i += 1
        raise self.fail(ParseErrorKind.UNTERMINATED_DOCTYPE, len(text))

    def parse_end_tag(self) -> None:
        start = self.pos
        self.pos += 2
        m = _NAME_RE.match(self.text, self.pos)
        name = m.group(0) if m else ""
        self.pos += len(name)
        self.skip_space()
        if self.pos >= len(self.text):
            raise self.fail(ParseErrorKind.UNTERMINATED_TAG, len(self.text))
        if self.text[self.pos] != ">":
            raise self.fail(ParseErrorKind.UNTERMINATED_TAG)
        self.pos += 1

        if not self.stack:
            raise self.fail(ParseErrorKind.UNEXPECTED_END_TAG, start)
        if self.stack[-1].name != name:
            raise self.fail(ParseErrorKind.MISMATCHED_END_TAG, start)
        self.stack.pop()

    def parse_start_tag(self) -> None:
        text = self.text
        length = len(text)
        self.pos += 1
        m = _NAME_RE.match(text, self.pos)
        if m is None:
            # A lone '<' (or '<' followed by a delimiter) cannot start a tag
            if self.pos >= length:
                raise self.fail(ParseErrorKind.UNTERMINATED_TAG)
            raise self.fail(ParseErrorKind.MALFORMED_ATTRIBUTE)
        element = Element(m.group(0))
        self.pos = m.end()

        while True:
            self.skip_space()
            if self.pos >= length:
                raise self.fail(ParseErrorKind.UNTERMINATED_TAG, length)
            ch = text[self.pos]
            if ch == ">":
                self.pos += 1
                self.emit(element)
                self.stack.append(element)
                return
            if ch == "/":
                if self.pos + 1 >= length:
                    raise self.fail(ParseErrorKind.UNTERMINATED_TAG, length)
                if text[self.pos + 1] != ">":
                    raise self.fail(ParseErrorKind.MALFORMED_ATTRIBUTE)
                self.pos += 2
                self.emit(element)
                return
            self.parse_attribute(element)

    def parse_attribute(self, element: Element) -> None:
        text = self.text
        length = len(text)
        m = _NAME_RE.match(text, self.pos)
        if m is None:
            raise self.fail(ParseErrorKind.MALFORMED_ATTRIBUTE)
        name = m.group(0)
        self.pos = m.end()
        self.skip_space()
        if self.pos >= length:
            raise self.fail(ParseErrorKind.UNTERMINATED_TAG, length)
        if text[self.pos] != "=":
            raise self.fail(ParseErrorKind.MALFORMED_ATTRIBUTE)
        self.pos += 1
        self.skip_space()
        if self.pos >= length:
            raise self.fail(ParseErrorKind.UNTERMINATED_TAG, length)
        quote = text[self.pos]
        if quote not in "\"'":
            raise self.fail(ParseErrorKind.MALFORMED_ATTRIBUTE)
        raw = self.read_until(quote, ParseErrorKind.UNTERMINATED_ATTRIBUTE_VALUE, self.pos + 1)
        # Duplicate names keep the first position and the last value
        element.attributes[name] = decode_entities(raw)


def parse(text: str) -> Document:
    """Parse markup text into a `Document`.

    Args:
        text (str): The markup source. The empty string yields an empty document.

    Returns:
        Document: The parsed tree.

    Raises:
        ParseError: If the input is not well-formed.
    """
    return _Parser(text).parse()

# topmark:header:start
#
#   project      : svgtidy
#   file         : test_printer.py
#   file_relpath : tests/dom/test_printer.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the canonical and pretty printers."""

from __future__ import annotations

from svgtidy.dom.model import Comment, Document, Element, Text
from svgtidy.dom.parser import parse
from svgtidy.dom.printer import PrintOptions, print_document
from tests.conftest import parametrize


@parametrize(
    "text",
    [
        "<svg/>",
        '<?xml version="1.0"?><svg xmlns="http://www.w3.org/2000/svg"><g id="a"><rect/></g></svg>',
        "<!DOCTYPE svg><svg><!-- note --><text>a &amp; b</text></svg>",
        '<svg a="x &quot;q&quot; &lt;"/>',
    ],
)
def test_canonical_output_round_trips(text: str) -> None:
    assert print_document(parse(text)) == text


def test_empty_elements_self_close() -> None:
    assert print_document(parse("<svg><g></g></svg>")) == "<svg><g/></svg>"


def test_single_quotes_are_normalized() -> None:
    assert print_document(parse("<svg a='it\"s'/>")) == '<svg a="it&quot;s"/>'


def test_text_escaping() -> None:
    doc = Document([Element("text", {}, [Text("1 < 2 & 3 > 0")])])
    assert print_document(doc) == "<text>1 &lt; 2 &amp; 3 &gt; 0</text>"


def test_cdata_is_printed_as_escaped_text() -> None:
    doc = parse("<style><![CDATA[a>b]]></style>")
    assert print_document(doc) == "<style>a&gt;b</style>"


def test_print_is_pure() -> None:
    doc = parse('<svg><g fill="red"><rect/></g></svg>')
    assert print_document(doc) == print_document(doc)


def test_pretty_output_indents_and_drops_layout_whitespace() -> None:
    doc = parse('<svg>\n  <g>\n<rect x="1"/></g><!--c--><text>hi <tspan>there</tspan></text></svg>')
    expected = (
        "<svg>\n"
        "  <g>\n"
        '    <rect x="1"/>\n'
        "  </g>\n"
        "  <!--c-->\n"
        "  <text>hi <tspan>there</tspan></text>\n"
        "</svg>\n"
    )
    assert print_document(doc, PrintOptions(pretty=True)) == expected


def test_pretty_indent_width() -> None:
    doc = Document([Element("svg", {}, [Element("g", {}, [Comment("x")])])])
    out = print_document(doc, PrintOptions(pretty=True, indent=4))
    assert out == "<svg>\n    <g>\n        <!--x-->\n    </g>\n</svg>\n"


def test_pretty_empty_document() -> None:
    assert print_document(Document(), PrintOptions(pretty=True)) == ""

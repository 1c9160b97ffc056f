# topmark:header:start
#
#   project      : svgtidy
#   file         : printer.py
#   file_relpath : src/svgtidy/dom/printer.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Serialize a `Document` back to markup text.

The canonical mode emits no whitespace of its own: what is in the tree is what
ends up in the output. The pretty mode puts every element on its own line and
indents it by nesting depth, except inside elements that hold text, which are
printed inline so that no character data is altered.

Printing is a pure function of the tree state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from svgtidy.constants import DEFAULT_INDENT
from svgtidy.dom.entities import escape_attribute, escape_text
from svgtidy.dom.model import (
    Comment,
    Doctype,
    Element,
    ProcessingInstruction,
    Text,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svgtidy.dom.model import Document, Node


@dataclass(frozen=True, slots=True)
class PrintOptions:
    """Printer settings.

    Attributes:
        pretty (bool): Emit one element per line with indentation.
        indent (int): Number of spaces per nesting level in pretty mode.
    """

    pretty: bool = False
    indent: int = DEFAULT_INDENT


def _start_tag(element: Element) -> str:
    parts = [element.name]
    for name, value in element.attributes.items():
        parts.append(f'{name}="{escape_attribute(value)}"')
    return "<" + " ".join(parts)


def _write_node(node: Node, out: list[str]) -> None:
    if isinstance(node, Element):
        _write_element(node, out)
    elif isinstance(node, Text):
        out.append(escape_text(node.value))
    elif isinstance(node, Comment):
        out.append(f"<!--{node.value}-->")
    elif isinstance(node, ProcessingInstruction):
        out.append(f"<?{node.value}?>")
    elif isinstance(node, Doctype):
        out.append(f"<!DOCTYPE {node.value}>")


def _write_element(element: Element, out: list[str]) -> None:
    out.append(_start_tag(element))
    if not element.children:
        out.append("/>")
        return
    out.append(">")
    for child in element.children:
        _write_node(child, out)
    out.append(f"</{element.name}>")


def _write_pretty(nodes: Iterable[Node], depth: int, indent: int, out: list[str]) -> None:
    pad = " " * (indent * depth)
    for node in nodes:
        if isinstance(node, Text):
            # Whitespace-only text between elements is replaced by the layout
            if not node.value.strip():
                continue
            out.append(pad + escape_text(node.value.strip()))
            continue
        if isinstance(node, Element) and node.children:
            if any(isinstance(child, Text) and child.value.strip() for child in node.children):
                inline: list[str] = []
                _write_element(node, inline)
                out.append(pad + "".join(inline))
                continue
            out.append(pad + _start_tag(node) + ">")
            _write_pretty(node.children, depth + 1, indent, out)
            out.append(f"{pad}</{node.name}>")
            continue
        single: list[str] = []
        _write_node(node, single)
        out.append(pad + "".join(single))


def print_document(doc: Document, options: PrintOptions | None = None) -> str:
    """Serialize ``doc`` to markup.

    Args:
        doc (Document): The document to print.
        options (PrintOptions | None): Output settings; ``None`` selects the canonical mode.

    Returns:
        str: The serialized markup. Pretty output ends with a newline.
    """
    if options is None or not options.pretty:
        out: list[str] = []
        for node in doc.children:
            _write_node(node, out)
        return "".join(out)

    lines: list[str] = []
    _write_pretty(doc.children, 0, max(options.indent, 0), lines)
    return "\n".join(lines) + "\n" if lines else ""

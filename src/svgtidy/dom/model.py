# topmark:header:start
#
#   project      : svgtidy
#   file         : model.py
#   file_relpath : src/svgtidy/dom/model.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""In-memory document tree.

The tree is a plain ownership hierarchy: a `Document` owns an ordered list of
top-level nodes and every `Element` owns its attributes and an ordered list of
children. Nodes never point back to their parent or to their siblings, so the
tree is acyclic by construction.

Ownership rules:
    - A node lives in exactly one children list at a time.
    - Relocating a node goes through `move_node`, which removes it from its source
      list and inserts it into the target list in one call.
    - Nothing is copied implicitly. Passes that need an independent snapshot of a
      subtree call `Element.clone()`.

Attributes are stored in a ``dict``: keys are unique and insertion order is kept,
which is what the printer emits and what "first child" comparisons rely on.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(eq=False)
class Text:
    """Character data between tags (entities already decoded)."""

    value: str


@dataclass(eq=False)
class Comment:
    """Comment payload without the ``<!--`` / ``-->`` delimiters."""

    value: str


@dataclass(eq=False)
class ProcessingInstruction:
    """Processing instruction payload without the ``<?`` / ``?>`` delimiters.

    The XML declaration is stored as a processing instruction whose payload starts
    with ``xml``.
    """

    value: str

    @property
    def target(self) -> str:
        """Return the PI target (the first whitespace-delimited token)."""
        parts = self.value.split(None, 1)
        return parts[0] if parts else ""


@dataclass(eq=False)
class Doctype:
    """Doctype payload: everything between ``<!DOCTYPE`` and the closing ``>``."""

    value: str


@dataclass(eq=False)
class Element:
    """A markup element.

    Attributes:
        name (str): Case-sensitive tag name (may carry a namespace prefix).
        attributes (dict[str, str]): Ordered attribute mapping.
        children (list[Node]): Ordered child nodes owned by this element.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    # --- attributes ---

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute ``name`` or ``default``."""
        return self.attributes.get(name, default)

    def has(self, name: str) -> bool:
        """Return True if the element carries attribute ``name``."""
        return name in self.attributes

    def set(self, name: str, value: str) -> None:
        """Set an attribute, keeping its position if it already exists."""
        self.attributes[name] = value

    def pop(self, name: str, default: str | None = None) -> str | None:
        """Remove attribute ``name`` and return its value (or ``default``)."""
        return self.attributes.pop(name, default)

    def remove_attributes(self, names: Iterable[str]) -> None:
        """Remove every attribute in ``names`` that is present."""
        for name in names:
            self.attributes.pop(name, None)

    # --- children ---

    def append(self, node: Node) -> None:
        """Append ``node`` to the children list."""
        self.children.append(node)

    def insert(self, index: int, node: Node) -> None:
        """Insert ``node`` at ``index``."""
        self.children.insert(index, node)

    def remove(self, node: Node) -> None:
        """Remove ``node`` (matched by identity) from the children list.

        Raises:
            ValueError: If ``node`` is not a child of this element.
        """
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                return
        raise ValueError("node is not a child of this element")

    def splice(self, start: int, stop: int, nodes: Iterable[Node] = ()) -> list[Node]:
        """Replace ``children[start:stop]`` by ``nodes`` and return the removed nodes."""
        removed = self.children[start:stop]
        self.children[start:stop] = list(nodes)
        return removed

    def replace_children(self, nodes: Iterable[Node]) -> None:
        """Swap in a rebuilt children list in one move."""
        self.children = list(nodes)

    def element_children(self) -> list[Element]:
        """Return the element children (text, comments and the like are skipped)."""
        return [child for child in self.children if isinstance(child, Element)]

    def iter_elements(self) -> Iterator[Element]:
        """Yield this element and every descendant element in document order."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter_elements()

    def text_content(self) -> str:
        """Return the concatenated text of all descendant text nodes."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, Text):
                parts.append(child.value)
            elif isinstance(child, Element):
                parts.append(child.text_content())
        return "".join(parts)

    def clone(self) -> Element:
        """Return an independent deep copy of this element and its subtree."""
        return copy.deepcopy(self)


Node = Union[Element, Text, Comment, ProcessingInstruction, Doctype]


@dataclass(eq=False)
class Document:
    """Root of a parsed markup tree.

    ``children`` normally holds exactly one element, possibly preceded (or followed) by
    prolog nodes such as the XML declaration, a doctype or comments.
    """

    children: list[Node] = field(default_factory=list)

    @property
    def root(self) -> Element | None:
        """Return the first top-level element, or None for an element-less document."""
        for node in self.children:
            if isinstance(node, Element):
                return node
        return None

    def iter_elements(self) -> Iterator[Element]:
        """Yield every element of the document in document order."""
        for node in self.children:
            if isinstance(node, Element):
                yield from node.iter_elements()

    def replace_children(self, nodes: Iterable[Node]) -> None:
        """Swap in a rebuilt top-level node list in one move."""
        self.children = list(nodes)


def move_node(
    source: list[Node],
    index: int,
    target: list[Node],
    target_index: int | None = None,
) -> Node:
    """Move ``source[index]`` into ``target``, transferring ownership.

    Args:
        source (list[Node]): Children list currently owning the node.
        index (int): Position of the node in ``source``.
        target (list[Node]): Children list that takes ownership.
        target_index (int | None): Insertion position in ``target``; ``None`` appends.

    Returns:
        Node: The moved node.
    """
    node = source.pop(index)
    if target_index is None:
        target.append(node)
    else:
        target.insert(target_index, node)
    return node

# topmark:header:start
#
#   project      : svgtidy
#   file         : visibility.py
#   file_relpath : src/svgtidy/pipeline/passes/visibility.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes that drop nodes which cannot contribute to the rendering.

Each pass rebuilds children lists bottom-up: the children of an element are
cleaned first, then the element itself is judged and kept or dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgtidy.codecs.path_data import parse_path_data
from svgtidy.config.logging import get_logger
from svgtidy.dom.model import Element, Text
from svgtidy.pipeline.passes.base import BasePass
from svgtidy.pipeline.passes.references import HREF_ATTRIBUTES, collect_references
from svgtidy.pipeline.passes.tables import (
    ANIMATION_ELEMENTS,
    CONTAINER_ELEMENTS,
    RENDERABLE_ELEMENTS,
    TEXT_CONTENT_ELEMENTS,
)
from svgtidy.pipeline.passes.values import is_zero
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Document, Node

logger: SvgtidyLogger = get_logger(__name__)


def _zero_size(element: Element) -> bool:
    name = element.name
    if name == "circle":
        return is_zero(element.get("r"))
    if name == "ellipse":
        return is_zero(element.get("rx")) or is_zero(element.get("ry"))
    if name in ("rect", "image"):
        return is_zero(element.get("width")) or is_zero(element.get("height"))
    if name == "path":
        d = element.get("d")
        return d is None or parse_path_data(d) == []
    if name in ("polyline", "polygon"):
        return not (element.get("points") or "").strip()
    return False


@register_pass("removeHiddenElems")
class RemoveHiddenElems(BasePass):
    """Remove elements that cannot render.

    Hidden means ``display="none"``, ``opacity="0"`` (outside ``<clipPath>``, where
    opacity is ignored), a zero radius or size, or an empty path or point list.
    An element is kept if it, or one of its descendants, carries a referenced id,
    or if it is animated.
    """

    def apply(self, doc: Document) -> None:
        refs = collect_references(doc)
        root = doc.root
        if root is not None:
            root.replace_children(self._clean(root.children, refs, False))

    def _clean(self, nodes: list[Node], refs: set[str], in_clip: bool) -> list[Node]:
        kept: list[Node] = []
        for node in nodes:
            if isinstance(node, Element):
                if self._hidden(node, in_clip) and not self._pinned(node, refs):
                    logger.debug("Removing hidden <%s>", node.name)
                    continue
                node.replace_children(
                    self._clean(node.children, refs, in_clip or node.name == "clipPath")
                )
            kept.append(node)
        return kept

    def _hidden(self, element: Element, in_clip: bool) -> bool:
        if element.name not in RENDERABLE_ELEMENTS:
            return False
        if (element.get("display") or "").strip() == "none":
            return True
        if not in_clip and is_zero(element.get("opacity")):
            return True
        return _zero_size(element)

    def _pinned(self, element: Element, refs: set[str]) -> bool:
        for descendant in element.iter_elements():
            if descendant.name in ANIMATION_ELEMENTS:
                return True
            value = descendant.get("id")
            if value is not None and value in refs:
                return True
        return False


@register_pass("removeEmptyText")
class RemoveEmptyText(BasePass):
    """Remove whitespace-only text and empty text elements.

    Whitespace inside text content elements (``<text>``, ``<tspan>``, ...) and
    under ``xml:space="preserve"`` is significant and kept. Empty ``<text>`` and
    ``<tspan>`` without an id, and ``<tref>`` without a target, are removed.
    """

    def apply(self, doc: Document) -> None:
        doc.replace_children(self._clean(doc.children, False, False))

    def _clean(self, nodes: list[Node], preserve: bool, in_text: bool) -> list[Node]:
        kept: list[Node] = []
        for node in nodes:
            if isinstance(node, Text):
                if preserve or in_text or node.value.strip():
                    kept.append(node)
                continue
            if not isinstance(node, Element):
                kept.append(node)
                continue
            space = node.get("xml:space")
            child_preserve = preserve if space is None else space == "preserve"
            node.replace_children(
                self._clean(
                    node.children, child_preserve, in_text or node.name in TEXT_CONTENT_ELEMENTS
                )
            )
            if node.name in ("text", "tspan") and not node.children and not node.has("id"):
                continue
            if node.name == "tref" and not any(node.has(name) for name in HREF_ATTRIBUTES):
                continue
            kept.append(node)
        return kept


@register_pass("removeEmptyContainers")
class RemoveEmptyContainers(BasePass):
    """Remove container elements left without children.

    Containers with an id (they may be referenced), groups with a filter (a
    filter can paint on an empty region), patterns inheriting content through
    ``href``, and children of ``<switch>`` are kept.
    """

    def apply(self, doc: Document) -> None:
        doc.replace_children(self._clean(doc.children, ""))

    def _clean(self, nodes: list[Node], parent_name: str) -> list[Node]:
        kept: list[Node] = []
        for node in nodes:
            if isinstance(node, Element):
                node.replace_children(self._clean(node.children, node.name))
                if self._removable(node, parent_name):
                    continue
            kept.append(node)
        return kept

    def _removable(self, element: Element, parent_name: str) -> bool:
        if element.name not in CONTAINER_ELEMENTS or element.children:
            return False
        if element.has("id") or parent_name == "switch":
            return False
        if element.name == "g" and element.has("filter"):
            return False
        if element.name == "pattern" and any(element.has(name) for name in HREF_ATTRIBUTES):
            return False
        return True

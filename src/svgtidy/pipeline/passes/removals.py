# topmark:header:start
#
#   project      : svgtidy
#   file         : removals.py
#   file_relpath : src/svgtidy/pipeline/passes/removals.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes that drop whole nodes matched by a static predicate."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar, Final

from svgtidy.config.logging import get_logger
from svgtidy.dom.model import Comment, Doctype, Element, ProcessingInstruction
from svgtidy.pipeline.passes.base import BasePass, filter_tree
from svgtidy.pipeline.passes.tables import EDITOR_NAMESPACES
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Document, Node

logger: SvgtidyLogger = get_logger(__name__)

RASTER_HREF_RE: Final[re.Pattern[str]] = re.compile(r"(\.|image/)(jpe?g|png|gif)\b", re.IGNORECASE)


class _ElementRemoval(BasePass):
    """Drop every element whose name is in ``element_names``."""

    element_names: ClassVar[frozenset[str]] = frozenset()

    def apply(self, doc: Document) -> None:
        def keep(node: Node) -> bool:
            return not (isinstance(node, Element) and node.name in self.element_names)

        doc.replace_children(filter_tree(doc.children, keep))


@register_pass("removeDoctype")
class RemoveDoctype(BasePass):
    """Remove the document type declaration."""

    def apply(self, doc: Document) -> None:
        doc.replace_children(node for node in doc.children if not isinstance(node, Doctype))


@register_pass("removeXMLProcInst")
class RemoveXMLProcInst(BasePass):
    """Remove the ``<?xml ...?>`` declaration."""

    def apply(self, doc: Document) -> None:
        doc.replace_children(
            node
            for node in doc.children
            if not (isinstance(node, ProcessingInstruction) and node.target == "xml")
        )


@register_pass("removeComments")
class RemoveComments(BasePass):
    """Remove comments."""

    def apply(self, doc: Document) -> None:
        doc.replace_children(filter_tree(doc.children, lambda n: not isinstance(n, Comment)))


@register_pass("removeMetadata")
class RemoveMetadata(_ElementRemoval):
    """Remove ``<metadata>``."""

    element_names = frozenset({"metadata"})


@register_pass("removeTitle")
class RemoveTitle(_ElementRemoval):
    """Remove ``<title>``."""

    element_names = frozenset({"title"})


@register_pass("removeDesc")
class RemoveDesc(_ElementRemoval):
    """Remove ``<desc>``."""

    element_names = frozenset({"desc"})


@register_pass("removeStyleElement", enabled_by_default=False)
class RemoveStyleElement(_ElementRemoval):
    """Remove ``<style>`` elements."""

    element_names = frozenset({"style"})


@register_pass("removeRasterImages")
class RemoveRasterImages(BasePass):
    """Remove ``<image>`` elements that embed or link PNG, JPEG or GIF data."""

    def apply(self, doc: Document) -> None:
        def keep(node: Node) -> bool:
            if not (isinstance(node, Element) and node.name == "image"):
                return True
            href = node.get("href") or node.get("xlink:href") or ""
            return RASTER_HREF_RE.search(href) is None

        doc.replace_children(filter_tree(doc.children, keep))


@register_pass("removeScriptElement")
class RemoveScriptElement(BasePass):
    """Remove scripts: ``<script>``, ``on*`` event attributes and ``javascript:`` links.

    A link whose target is a script is unwrapped: its children take its place.
    """

    def apply(self, doc: Document) -> None:
        doc.replace_children(self._clean(doc.children))

    def _clean(self, nodes: list[Node]) -> list[Node]:
        cleaned: list[Node] = []
        for node in nodes:
            if not isinstance(node, Element):
                cleaned.append(node)
                continue
            if node.name == "script":
                continue
            node.remove_attributes([name for name in node.attributes if name.startswith("on")])
            node.replace_children(self._clean(node.children))
            href = node.get("href") or node.get("xlink:href") or ""
            if node.name == "a" and href.strip().lower().startswith("javascript:"):
                cleaned.extend(node.children)
                continue
            cleaned.append(node)
        return cleaned


@register_pass("removeEditorsNSData")
class RemoveEditorsNSData(BasePass):
    """Remove elements, attributes and namespace declarations of drawing editors."""

    def apply(self, doc: Document) -> None:
        doc.replace_children(self._clean(doc.children, frozenset()))

    def _clean(self, nodes: list[Node], prefixes: frozenset[str]) -> list[Node]:
        cleaned: list[Node] = []
        for node in nodes:
            if not isinstance(node, Element):
                cleaned.append(node)
                continue
            declared = {
                name[len("xmlns:") :]
                for name, value in node.attributes.items()
                if name.startswith("xmlns:") and value in EDITOR_NAMESPACES
            }
            scope = prefixes | declared
            if ":" in node.name and node.name.split(":", 1)[0] in scope:
                logger.debug("Removing editor element <%s>", node.name)
                continue
            node.remove_attributes(
                [
                    name
                    for name in node.attributes
                    if ":" in name
                    and (
                        name.split(":", 1)[0] in scope
                        or (name.startswith("xmlns:") and name[len("xmlns:") :] in declared)
                    )
                ]
            )
            node.replace_children(self._clean(node.children, scope))
            cleaned.append(node)
        return cleaned

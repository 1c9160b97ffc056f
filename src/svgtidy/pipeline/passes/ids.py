# topmark:header:start
#
#   project      : svgtidy
#   file         : ids.py
#   file_relpath : src/svgtidy/pipeline/passes/ids.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes built on id references: ids, definitions and gradients."""

from __future__ import annotations

import string
from collections import Counter
from typing import TYPE_CHECKING, Final

from svgtidy.codecs.colors import parse_color
from svgtidy.config.logging import get_logger
from svgtidy.dom.model import Element
from svgtidy.pipeline.passes.base import BasePass, has_element, iter_parents
from svgtidy.pipeline.passes.references import (
    HREF_ATTRIBUTES,
    URL_REFERENCE_RE,
    collect_references,
    rewrite_references,
)
from svgtidy.pipeline.passes.values import equivalent
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from collections.abc import Iterator

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Document, Node

logger: SvgtidyLogger = get_logger(__name__)

ID_ALPHABET: Final[str] = string.ascii_lowercase + string.ascii_uppercase
GRADIENT_ELEMENTS: Final[tuple[str, ...]] = ("linearGradient", "radialGradient")
PAINT_ATTRIBUTES: Final[tuple[str, ...]] = ("fill", "stroke")


def short_ids() -> Iterator[str]:
    """Yield ``a`` .. ``z``, ``A`` .. ``Z``, ``aa``, ``ab`` .. in order."""
    length = 1
    while True:
        indices = [0] * length
        while True:
            yield "".join(ID_ALPHABET[i] for i in indices)
            pos = length - 1
            while pos >= 0 and indices[pos] == len(ID_ALPHABET) - 1:
                indices[pos] = 0
                pos -= 1
            if pos < 0:
                break
            indices[pos] += 1
        length += 1


@register_pass("cleanupIds")
class CleanupIds(BasePass):
    """Remove unreferenced ids and shorten the referenced ones.

    Referenced ids are renamed to ``a``, ``b``, ... in document order, and every
    reference is rewritten. Only the first element carrying a duplicated id keeps
    it. Documents with ``<style>`` or ``<script>`` are left alone since selectors
    and code may refer to ids.
    """

    def apply(self, doc: Document) -> None:
        if has_element(doc, "style", "script"):
            return
        refs = collect_references(doc)
        names = short_ids()
        mapping: dict[str, str] = {}
        for element in doc.iter_elements():
            value = element.get("id")
            if value is None:
                continue
            if value not in refs or value in mapping:
                element.pop("id")
                continue
            mapping[value] = next(names)
            element.set("id", mapping[value])
        if mapping:
            logger.debug("Renaming ids: %s", mapping)
        for element in doc.iter_elements():
            rewrite_references(element, mapping.get)


@register_pass("removeUselessDefs")
class RemoveUselessDefs(BasePass):
    """Keep only content that can be referenced inside ``<defs>``.

    A definition without an id cannot be referenced. Its id-bearing descendants
    are lifted into the ``<defs>``; everything else goes.
    """

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            if element.name == "defs":
                useful: list[Node] = []
                for child in element.element_children():
                    useful.extend(self._collect(child))
                element.replace_children(useful)

    def _collect(self, element: Element) -> list[Node]:
        if element.has("id") or element.name == "style":
            return [element]
        found: list[Node] = []
        for child in element.element_children():
            found.extend(self._collect(child))
        return found


@register_pass("sortDefsChildren")
class SortDefsChildren(BasePass):
    """Sort ``<defs>`` children by element name frequency, then by name (helps compression)."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            if element.name != "defs" or len(element.children) < 2:
                continue
            # Text or comments between definitions pin the order
            if any(not isinstance(child, Element) for child in element.children):
                continue
            frequency = Counter(child.name for child in element.element_children())
            element.replace_children(
                sorted(element.element_children(), key=lambda c: (-frequency[c.name], c.name))
            )


@register_pass("convertOneStopGradients")
class ConvertOneStopGradients(BasePass):
    """Replace references to single-stop gradients by the stop color.

    Only ``fill``/``stroke`` values that consist of the reference alone are
    replaced; the gradient is removed once nothing refers to it any more.
    Gradients that inherit from, or are inherited by, another gradient through
    ``href`` are left alone, as are stops with a partial opacity.
    """

    def apply(self, doc: Document) -> None:
        href_targets: set[str] = set()
        for element in doc.iter_elements():
            for name in HREF_ATTRIBUTES:
                value = element.get(name)
                if value is not None and value.startswith("#"):
                    href_targets.add(value[1:])

        colors: dict[str, str] = {}
        owners: dict[str, tuple[Element, Element]] = {}
        for element, ancestors in iter_parents(doc):
            if element.name not in GRADIENT_ELEMENTS or not ancestors:
                continue
            gradient_id = element.get("id")
            if gradient_id is None or gradient_id in href_targets:
                continue
            if any(element.has(name) for name in HREF_ATTRIBUTES):
                continue
            color = self._solid_color(element)
            if color is not None:
                colors[gradient_id] = color
                owners[gradient_id] = (ancestors[-1], element)
        if not colors:
            return

        for element in doc.iter_elements():
            for name in PAINT_ATTRIBUTES:
                value = element.get(name)
                if value is None:
                    continue
                m = URL_REFERENCE_RE.fullmatch(value.strip())
                if m is not None and m.group(2) in colors:
                    element.set(name, colors[m.group(2)])

        remaining = collect_references(doc)
        for gradient_id, (parent, gradient) in owners.items():
            if gradient_id not in remaining:
                logger.debug("Removing single-stop gradient #%s", gradient_id)
                parent.remove(gradient)

    def _solid_color(self, gradient: Element) -> str | None:
        children = gradient.element_children()
        if len(children) != 1 or children[0].name != "stop":
            return None
        stop = children[0]
        if stop.has("style"):
            return None
        opacity = stop.get("stop-opacity")
        if opacity is not None and not equivalent("stop-opacity", opacity, "1"):
            return None
        color = stop.get("stop-color") or "#000"
        if parse_color(color) is None:
            return None
        return color

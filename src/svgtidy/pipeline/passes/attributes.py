# topmark:header:start
#
#   project      : svgtidy
#   file         : attributes.py
#   file_relpath : src/svgtidy/pipeline/passes/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes that rewrite or drop individual attributes.

Several of these passes need the value an attribute inherits from the ancestors
of an element. They walk the tree top-down carrying a mapping of inherited
presentation attributes, updated from each element's own attributes before its
children are visited.

Content that may be instantiated by ``<use>`` (anything with an id, and the
content of ``<symbol>``) inherits from the referencing element instead of its
ancestors; inherited-value decisions are skipped there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from svgtidy.config.logging import get_logger
from svgtidy.dom.model import Element
from svgtidy.pipeline.passes.base import BasePass, NumericPass, has_element
from svgtidy.pipeline.passes.tables import (
    ANIMATION_ELEMENTS,
    ATTRIBUTE_DEFAULTS,
    ATTRIBUTE_ORDER,
    CONDITIONAL_ATTRIBUTES,
    INHERITABLE_ATTRIBUTES,
    PRESENTATION_ATTRIBUTES,
    SHAPE_ELEMENTS,
)
from svgtidy.pipeline.passes.values import equivalent, is_zero
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from collections.abc import Mapping

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Document

logger: SvgtidyLogger = get_logger(__name__)

MARKER_ATTRIBUTES: Final[tuple[str, ...]] = ("marker", "marker-start", "marker-mid", "marker-end")
_RESERVED_PREFIXES: Final[frozenset[str]] = frozenset({"xml", "xmlns"})


def _attributes_length(attributes: Mapping[str, str]) -> int:
    # name="value" plus the leading space
    return sum(len(name) + len(value) + 4 for name, value in attributes.items())


def _is_instantiable(element: Element) -> bool:
    return element.has("id") or element.name == "symbol"


def _inherit(inherited: Mapping[str, str], element: Element) -> dict[str, str]:
    merged = dict(inherited)
    for name, value in element.attributes.items():
        if name in INHERITABLE_ATTRIBUTES:
            merged[name] = value
    return merged


def parse_style(text: str) -> list[tuple[str, str]] | None:
    """Split a ``style`` attribute into ``(property, value)`` declarations.

    Only plain declaration lists are understood. Comments, quoted strings and
    escapes make the style opaque and yield None.

    Args:
        text (str): The ``style`` attribute value.

    Returns:
        list[tuple[str, str]] | None: Declarations in source order, or None.
    """
    if any(marker in text for marker in ('"', "'", "/*", "\\")):
        return None
    declarations: list[tuple[str, str]] = []
    for chunk in text.split(";"):
        if not chunk.strip():
            continue
        name, sep, value = chunk.partition(":")
        if not sep or not name.strip() or not value.strip():
            return None
        declarations.append((name.strip().lower(), value.strip()))
    return declarations


@register_pass("convertStyleToAttrs")
class ConvertStyleToAttrs(BasePass):
    """Promote ``style`` presentation declarations to attributes when not longer.

    Declarations that are not presentation attributes, or that carry
    ``!important``, stay in ``style``. Promoted values take the position of
    ``style``; an attribute already present keeps its position and takes the
    declared value, since ``style`` wins over attributes.
    """

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            style = element.get("style")
            if style is None:
                continue
            declarations = parse_style(style)
            if declarations is None:
                continue
            promoted: dict[str, str] = {}
            remaining: list[str] = []
            for name, value in declarations:
                if name in PRESENTATION_ATTRIBUTES and "!important" not in value:
                    promoted[name] = value
                else:
                    remaining.append(f"{name}:{value}")

            rebuilt: dict[str, str] = {}
            for name, value in element.attributes.items():
                if name == "style":
                    for p_name, p_value in promoted.items():
                        if p_name not in element.attributes:
                            rebuilt[p_name] = p_value
                    if remaining:
                        rebuilt["style"] = ";".join(remaining)
                else:
                    rebuilt[name] = promoted.get(name, value)
            if _attributes_length(rebuilt) <= _attributes_length(element.attributes):
                element.attributes = rebuilt


@register_pass("cleanupAttrs")
class CleanupAttrs(BasePass):
    """Collapse newlines and whitespace runs in attribute values and trim them."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            for name, value in element.attributes.items():
                cleaned = " ".join(value.split())
                if cleaned != value:
                    element.attributes[name] = cleaned


@register_pass("removeEmptyAttrs")
class RemoveEmptyAttrs(BasePass):
    """Remove attributes with an empty value (conditional processing attributes excepted)."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            element.remove_attributes(
                [
                    name
                    for name, value in element.attributes.items()
                    if value == "" and name not in CONDITIONAL_ATTRIBUTES
                ]
            )


@register_pass("removeUnknownsAndDefaults")
@dataclass
class RemoveUnknownsAndDefaults(NumericPass):
    """Remove attributes equal to their initial value, and undeclared prefixed attributes.

    An inheritable attribute is only removed when the value inherited from the
    ancestors is the initial value too.
    """

    def apply(self, doc: Document) -> None:
        for node in doc.children:
            if isinstance(node, Element):
                self._visit(node, {}, frozenset(), False)

    def _visit(
        self,
        element: Element,
        inherited: Mapping[str, str],
        prefixes: frozenset[str],
        instantiable: bool,
    ) -> None:
        prefixes = prefixes | {
            name[len("xmlns:") :] for name in element.attributes if name.startswith("xmlns:")
        }
        instantiable = instantiable or _is_instantiable(element)
        removed: list[str] = []
        for name, value in element.attributes.items():
            if ":" in name:
                prefix = name.split(":", 1)[0]
                if prefix not in prefixes and prefix not in _RESERVED_PREFIXES:
                    removed.append(name)
                continue
            if element.name in ANIMATION_ELEMENTS:
                continue
            default = ATTRIBUTE_DEFAULTS.get(name)
            if default is None or not equivalent(name, value, default, self.precision):
                continue
            if name in INHERITABLE_ATTRIBUTES:
                if instantiable:
                    continue
                parent_value = inherited.get(name)
                if parent_value is not None and not equivalent(
                    name, parent_value, default, self.precision
                ):
                    continue
            removed.append(name)
        if removed:
            logger.debug("<%s>: removing %s", element.name, ", ".join(removed))
            element.remove_attributes(removed)

        child_inherited = _inherit(inherited, element)
        for child in element.element_children():
            self._visit(child, child_inherited, prefixes, instantiable)


@register_pass("removeUselessStrokeAndFill")
@dataclass
class RemoveUselessStrokeAndFill(NumericPass):
    """Remove stroke and fill attributes of shapes that cannot paint them.

    A stroke cannot paint when it is ``none`` or has a zero width or opacity; a
    fill cannot paint when it is ``none`` or has a zero opacity. Shapes with
    markers, ids, or inside ``<symbol>`` are left alone. The pass does nothing
    when the document has ``<style>`` or ``<script>`` elements.
    """

    def apply(self, doc: Document) -> None:
        if has_element(doc, "style", "script"):
            return
        for node in doc.children:
            if isinstance(node, Element):
                self._visit(node, {}, False)

    def _effective(self, element: Element, inherited: Mapping[str, str], name: str) -> str | None:
        value = element.get(name)
        return inherited.get(name) if value is None else value

    def _visit(self, element: Element, inherited: Mapping[str, str], instantiable: bool) -> None:
        instantiable = instantiable or _is_instantiable(element)
        if element.name in SHAPE_ELEMENTS and not instantiable:
            self._clean_shape(element, inherited)
        child_inherited = _inherit(inherited, element)
        for child in element.element_children():
            self._visit(child, child_inherited, instantiable)

    def _clean_shape(self, element: Element, inherited: Mapping[str, str]) -> None:
        if any(self._effective(element, inherited, name) for name in MARKER_ATTRIBUTES):
            return

        stroke = (self._effective(element, inherited, "stroke") or "none").strip()
        if (
            stroke == "none"
            or is_zero(self._effective(element, inherited, "stroke-width"))
            or is_zero(self._effective(element, inherited, "stroke-opacity"))
        ):
            element.remove_attributes([n for n in element.attributes if n.startswith("stroke-")])
            if (inherited.get("stroke") or "none").strip() == "none":
                element.pop("stroke")
            else:
                element.set("stroke", "none")

        fill = (self._effective(element, inherited, "fill") or "#000").strip()
        if fill == "none" or is_zero(self._effective(element, inherited, "fill-opacity")):
            element.remove_attributes([n for n in element.attributes if n.startswith("fill-")])
            if (inherited.get("fill") or "").strip() == "none":
                element.pop("fill")
            else:
                element.set("fill", "none")


@register_pass("removeDimensions")
class RemoveDimensions(BasePass):
    """Remove ``width``/``height`` from the root ``<svg>`` when it has a ``viewBox``."""

    def apply(self, doc: Document) -> None:
        root = doc.root
        if root is not None and root.name == "svg" and root.has("viewBox"):
            root.remove_attributes(("width", "height"))


@register_pass("removeUnusedNS")
class RemoveUnusedNS(BasePass):
    """Remove ``xmlns:prefix`` declarations that nothing in their scope uses."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            declared = [name for name in element.attributes if name.startswith("xmlns:")]
            if not declared:
                continue
            used: set[str] = set()
            for descendant in element.iter_elements():
                if ":" in descendant.name:
                    used.add(descendant.name.split(":", 1)[0])
                for name in descendant.attributes:
                    if ":" in name and not name.startswith("xmlns:"):
                        used.add(name.split(":", 1)[0])
            element.remove_attributes(
                [name for name in declared if name[len("xmlns:") :] not in used]
            )


def attribute_sort_key(name: str) -> tuple[int, str]:
    """Sort key for `SortAttrs`: namespace declarations, known names, then alphabetical."""
    if name == "xmlns":
        return (0, "")
    if name.startswith("xmlns:"):
        return (1, name)
    if name in ATTRIBUTE_ORDER:
        return (2 + ATTRIBUTE_ORDER.index(name), "")
    return (2 + len(ATTRIBUTE_ORDER), name)


@register_pass("sortAttrs")
class SortAttrs(BasePass):
    """Sort attributes in a canonical order (helps compression)."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            if len(element.attributes) > 1:
                element.attributes = dict(
                    sorted(element.attributes.items(), key=lambda item: attribute_sort_key(item[0]))
                )

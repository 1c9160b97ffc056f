# topmark:header:start
#
#   project      : svgtidy
#   file         : groups.py
#   file_relpath : src/svgtidy/pipeline/passes/groups.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes that move attributes across ``<g>`` boundaries and unwrap groups.

A group's ``clip-path``, ``mask`` and ``filter`` are evaluated in the group's own
user space and against its whole content, so groups carrying them are never
taken apart. Elements with an id may be instantiated elsewhere by ``<use>``,
where they inherit from the referencing element; their attributes are never
moved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from svgtidy.codecs.transform import minify_transform
from svgtidy.config.logging import get_logger
from svgtidy.constants import DEFAULT_DEG_PRECISION
from svgtidy.dom.model import Element
from svgtidy.pipeline.passes.base import BasePass, NumericPass
from svgtidy.pipeline.passes.tables import (
    ANIMATION_ELEMENTS,
    INHERITABLE_ATTRIBUTES,
    SHAPE_ELEMENTS,
)
from svgtidy.pipeline.passes.values import equivalent
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.config.model import Config
    from svgtidy.dom.model import Document, Node

logger: SvgtidyLogger = get_logger(__name__)

GROUP_ONLY_ATTRIBUTES: Final[tuple[str, ...]] = ("clip-path", "mask", "filter")

# Elements that accept a transform of their own
TRANSFORMABLE_ELEMENTS: Final[frozenset[str]] = SHAPE_ELEMENTS | frozenset(
    {"a", "g", "image", "switch", "text", "use", "foreignObject"}
)


def _prepend_transform(element: Element, transform: str) -> None:
    own = element.get("transform")
    element.set("transform", transform if own is None else f"{transform} {own}")


@register_pass("moveGroupAttrsToElems")
@dataclass
class MoveGroupAttrsToElems(NumericPass):
    """Push a group's ``transform`` down to its children.

    Applies to groups whose only attribute is ``transform`` and whose children
    all accept a transform, when the children's extra text is no longer than the
    group markup it lets `CollapseGroups` remove.
    """

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            if element.name != "g" or list(element.attributes) != ["transform"]:
                continue
            children = element.element_children()
            if not children or len(children) != len(element.children):
                continue
            if any(
                child.name not in TRANSFORMABLE_ELEMENTS or child.has("id") for child in children
            ):
                continue
            transform = element.attributes["transform"]
            added = sum(
                len(transform) + 1 if child.has("transform") else len(transform) + 13
                for child in children
            )
            # ' transform=""' on the group plus '<g>' and '</g>'
            saved = len(transform) + 13 + 7
            if added > saved:
                continue
            for child in children:
                _prepend_transform(child, transform)
            element.pop("transform")
            logger.debug("Moved group transform %r to %d child(ren)", transform, len(children))


@register_pass("moveElemsAttrsToGroup")
@dataclass
class MoveElemsAttrsToGroup(NumericPass):
    """Hoist inheritable attributes shared by all children of a group onto the group.

    The group needs at least two element children and nothing else; children
    with an id block the move.
    """

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            if element.name != "g":
                continue
            children = element.element_children()
            if len(children) < 2 or len(children) != len(element.children):
                continue
            if any(child.has("id") or child.name in ANIMATION_ELEMENTS for child in children):
                continue
            first = children[0]
            shared = [
                name
                for name in first.attributes
                if name in INHERITABLE_ATTRIBUTES
                and all(
                    child.has(name)
                    and equivalent(
                        name, first.attributes[name], child.attributes[name], self.precision
                    )
                    for child in children[1:]
                )
            ]
            if not shared:
                continue
            for name in shared:
                element.set(name, first.attributes[name])
                for child in children:
                    child.pop(name)
            logger.debug("Hoisted %s onto <g>", ", ".join(shared))


@register_pass("collapseGroups")
@dataclass
class CollapseGroups(NumericPass):
    """Replace useless groups by their content.

    A group is unwrapped when it has no attributes, or only an identity
    ``transform``. A group with a single element child is unwrapped as well when
    its attributes can move onto the child: ``transform`` is prepended to the
    child's, ``opacity`` and inheritable attributes move unless the child sets
    its own opacity (for inheritable ones, the child's own value wins and the
    group's is dropped). Groups directly inside ``<switch>`` or
    ``<foreignObject>`` are kept.
    """

    deg_precision: int = DEFAULT_DEG_PRECISION

    @classmethod
    def from_config(cls, config: Config) -> BasePass:
        return cls(
            precision=config.precision,
            remove_leading_zero=config.remove_leading_zero,
            deg_precision=config.deg_precision,
        )

    def apply(self, doc: Document) -> None:
        doc.replace_children(self._clean(doc.children, ""))

    def _clean(self, nodes: list[Node], parent_name: str) -> list[Node]:
        kept: list[Node] = []
        for node in nodes:
            if isinstance(node, Element):
                node.replace_children(self._clean(node.children, node.name))
                if (
                    node.name == "g"
                    and parent_name not in ("switch", "foreignObject")
                    and self._unwrap(node)
                ):
                    kept.extend(node.children)
                    continue
            kept.append(node)
        return kept

    def _is_identity(self, transform: str) -> bool:
        return (
            minify_transform(
                transform,
                precision=self.precision,
                deg_precision=self.deg_precision,
                remove_leading_zero=self.remove_leading_zero,
            )
            == ""
        )

    def _unwrap(self, group: Element) -> bool:
        names = list(group.attributes)
        if not names:
            return True
        if names == ["transform"] and self._is_identity(group.attributes["transform"]):
            return True
        if len(group.children) != 1 or not isinstance(group.children[0], Element):
            return False
        child = group.children[0]
        if child.has("id") or child.name in ANIMATION_ELEMENTS:
            return False
        for name in names:
            if name == "transform":
                if child.name not in TRANSFORMABLE_ELEMENTS or any(
                    child.has(n) for n in GROUP_ONLY_ATTRIBUTES
                ):
                    return False
            elif name == "opacity":
                if child.has("opacity"):
                    return False
            elif name not in INHERITABLE_ATTRIBUTES:
                return False

        for name in names:
            value = group.attributes[name]
            if name == "transform":
                _prepend_transform(child, value)
            elif not child.has(name):
                child.set(name, value)
        logger.debug("Collapsed <g> into its only child <%s>", child.name)
        return True

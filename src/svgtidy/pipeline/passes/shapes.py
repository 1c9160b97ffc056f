# topmark:header:start
#
#   project      : svgtidy
#   file         : shapes.py
#   file_relpath : src/svgtidy/pipeline/passes/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes that rewrite geometry: basic shapes and path data."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from svgtidy.codecs.numbers import parse_length, parse_number_list
from svgtidy.codecs.path_data import (
    PathSegment,
    bounding_box,
    boxes_intersect,
    optimize_path,
    parse_path_data,
    serialize_path_data,
    to_absolute,
)
from svgtidy.config.logging import get_logger
from svgtidy.dom.model import Element
from svgtidy.pipeline.passes.base import BasePass, NumericPass
from svgtidy.pipeline.passes.values import equivalent
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.config.model import Config
    from svgtidy.dom.model import Document, Node

logger: SvgtidyLogger = get_logger(__name__)

# Geometry attributes consumed by the conversion of each shape
SHAPE_GEOMETRY: Final[dict[str, tuple[str, ...]]] = {
    "rect": ("x", "y", "width", "height"),
    "line": ("x1", "y1", "x2", "y2"),
    "polyline": ("points",),
    "polygon": ("points",),
    "circle": ("cx", "cy", "r"),
    "ellipse": ("cx", "cy", "rx", "ry"),
}

# Attributes that make a path's rendering depend on its own extent or vertices
MERGE_BLOCKERS: Final[tuple[str, ...]] = (
    "id",
    "clip-path",
    "mask",
    "filter",
    "marker",
    "marker-start",
    "marker-mid",
    "marker-end",
    "style",
    "opacity",
    "fill-opacity",
    "stroke-opacity",
)


def _user_number(element: Element, name: str, default: float | None = 0.0) -> float | None:
    """Return a unitless (or ``px``) attribute value.

    None when the attribute is absent and has no default, or is not a user length.
    """
    value = element.get(name)
    if value is None:
        return default
    length = parse_length(value)
    if length is None or length[1] not in ("", "px"):
        return None
    return length[0]


def _replace_geometry(element: Element, d: str) -> None:
    """Turn ``element`` into a ``<path>``; ``d`` takes the place of the first geometry attribute."""
    geometry = SHAPE_GEOMETRY[element.name]
    rebuilt: dict[str, str] = {}
    for name, value in element.attributes.items():
        if name in geometry:
            if "d" not in rebuilt:
                rebuilt["d"] = d
            continue
        rebuilt[name] = value
    if "d" not in rebuilt:
        rebuilt["d"] = d
    element.name = "path"
    element.attributes = rebuilt


@register_pass("convertEllipseToCircle")
@dataclass
class ConvertEllipseToCircle(NumericPass):
    """Turn ``<ellipse>`` elements with equal radii into ``<circle>``."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            if element.name != "ellipse":
                continue
            rx, ry = element.get("rx"), element.get("ry")
            if rx is None or ry is None or not equivalent("r", rx, ry, self.precision):
                continue
            rebuilt: dict[str, str] = {}
            for name, value in element.attributes.items():
                if name == "rx":
                    rebuilt["r"] = value
                elif name != "ry":
                    rebuilt[name] = value
            element.name = "circle"
            element.attributes = rebuilt


@register_pass("convertShapeToPath")
@dataclass
class ConvertShapeToPath(NumericPass):
    """Convert basic shapes to ``<path>``.

    Rectangles without rounded corners, lines, polylines and polygons are always
    converted. Circles and ellipses are converted to arcs only when
    ``convert_arcs`` is set. Shapes with non-user units are left alone.
    """

    convert_arcs: bool = False

    @classmethod
    def from_config(cls, config: Config) -> BasePass:
        return cls(
            precision=config.precision,
            remove_leading_zero=config.remove_leading_zero,
            convert_arcs=config.convert_arcs,
        )

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            segments = self._segments(element)
            if segments is None:
                continue
            if not all(math.isfinite(v) for seg in to_absolute(segments) for v in seg.args):
                logger.debug("<%s> geometry overflows; left as is", element.name)
                continue
            d = serialize_path_data(
                segments, precision=self.precision, remove_leading_zero=self.remove_leading_zero
            )
            logger.debug("<%s> -> <path d=%r>", element.name, d)
            _replace_geometry(element, d)

    def _segments(self, element: Element) -> list[PathSegment] | None:
        name = element.name
        if name == "rect":
            return self._rect(element)
        if name == "line":
            coords = [_user_number(element, n) for n in SHAPE_GEOMETRY["line"]]
            if any(c is None for c in coords):
                return None
            x1, y1, x2, y2 = (float(c or 0.0) for c in coords)
            return [PathSegment("M", False, (x1, y1)), PathSegment("L", False, (x2, y2))]
        if name in ("polyline", "polygon"):
            points = parse_number_list(element.get("points") or "")
            if points is None or len(points) < 4 or len(points) % 2:
                return None
            segments = [PathSegment("M", False, tuple(points[:2]))]
            segments.extend(
                PathSegment("L", False, tuple(points[i : i + 2])) for i in range(2, len(points), 2)
            )
            if name == "polygon":
                segments.append(PathSegment("Z", False, ()))
            return segments
        if name in ("circle", "ellipse") and self.convert_arcs:
            return self._arcs(element)
        return None

    def _rect(self, element: Element) -> list[PathSegment] | None:
        if element.has("rx") or element.has("ry"):
            return None
        x = _user_number(element, "x")
        y = _user_number(element, "y")
        width = _user_number(element, "width", None)
        height = _user_number(element, "height", None)
        if x is None or y is None or width is None or height is None:
            return None
        if width <= 0 or height <= 0:
            return None
        return [
            PathSegment("M", False, (x, y)),
            PathSegment("H", True, (width,)),
            PathSegment("V", True, (height,)),
            PathSegment("H", True, (-width,)),
            PathSegment("Z", True, ()),
        ]

    def _arcs(self, element: Element) -> list[PathSegment] | None:
        cx = _user_number(element, "cx")
        cy = _user_number(element, "cy")
        if element.name == "circle":
            rx = ry = _user_number(element, "r", None)
        else:
            rx = _user_number(element, "rx", None)
            ry = _user_number(element, "ry", None)
        if cx is None or cy is None or rx is None or ry is None or rx <= 0 or ry <= 0:
            return None
        return [
            PathSegment("M", False, (cx - rx, cy)),
            PathSegment("A", False, (rx, ry, 0.0, 1.0, 0.0, cx + rx, cy)),
            PathSegment("A", False, (rx, ry, 0.0, 1.0, 0.0, cx - rx, cy)),
            PathSegment("Z", True, ()),
        ]


@register_pass("mergePaths")
class MergePaths(BasePass):
    """Merge adjacent ``<path>`` siblings with equivalent attributes.

    Paths are merged only when their bounding boxes are disjoint, so that no
    fill rule or overlap can change the painting. Paths whose rendering depends
    on their own extent or vertices (markers, clipping, masks, filters,
    gradients in bounding box units, partial opacity) are never merged.
    """

    def apply(self, doc: Document) -> None:
        for node in doc.children:
            if isinstance(node, Element):
                self._visit(node, False)

    def _mergeable(self, element: Element) -> bool:
        if element.name != "path" or any(element.has(name) for name in MERGE_BLOCKERS):
            return False
        return not any("url(" in (element.get(name) or "") for name in ("fill", "stroke"))

    def _same_attributes(self, first: Element, second: Element) -> bool:
        names = set(first.attributes) - {"d"}
        if names != set(second.attributes) - {"d"}:
            return False
        return all(
            equivalent(name, first.attributes[name], second.attributes[name]) for name in names
        )

    def _visit(self, element: Element, markers: bool) -> None:
        markers = markers or any(
            element.has(name) for name in ("marker", "marker-start", "marker-mid", "marker-end")
        )
        kept: list[Node] = []
        current: Element | None = None
        current_segments: list[PathSegment] = []
        current_box: tuple[float, float, float, float] | None = None
        for child in element.children:
            if isinstance(child, Element) and not markers and self._mergeable(child):
                segments = parse_path_data(child.get("d") or "")
                box = bounding_box(segments) if segments else None
                if segments and box is not None:
                    if (
                        current is not None
                        and current_box is not None
                        and self._same_attributes(current, child)
                        and not boxes_intersect(current_box, box)
                    ):
                        current_segments = current_segments + to_absolute(segments)
                        current_box = (
                            min(current_box[0], box[0]),
                            min(current_box[1], box[1]),
                            max(current_box[2], box[2]),
                            max(current_box[3], box[3]),
                        )
                        current.set("d", serialize_path_data(current_segments))
                        logger.debug("Merged a path into its previous sibling")
                        continue
                    current, current_segments, current_box = child, segments, box
                    kept.append(child)
                    continue
            if isinstance(child, Element):
                self._visit(child, markers)
            current, current_segments, current_box = None, [], None
            kept.append(child)
        element.replace_children(kept)


@register_pass("convertPathData")
@dataclass
class ConvertPathData(NumericPass):
    """Re-encode path data in its shortest form at the configured precision."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            d = element.get("d")
            if d is None:
                continue
            segments = parse_path_data(d)
            if not segments:
                continue
            optimized = serialize_path_data(
                optimize_path(
                    segments,
                    precision=self.precision,
                    remove_leading_zero=self.remove_leading_zero,
                ),
                precision=self.precision,
                remove_leading_zero=self.remove_leading_zero,
            )
            if len(optimized) <= len(d):
                element.set("d", optimized)

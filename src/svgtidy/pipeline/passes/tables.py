# topmark:header:start
#
#   project      : svgtidy
#   file         : tables.py
#   file_relpath : src/svgtidy/pipeline/passes/tables.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Read-only SVG vocabulary shared by the passes.

These tables are module-level constants built once at import time and never
mutated.
"""

from __future__ import annotations

from typing import Final

SHAPE_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"circle", "ellipse", "line", "path", "polygon", "polyline", "rect"}
)

TEXT_CONTENT_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"text", "tspan", "textPath", "tref", "altGlyph", "title", "desc", "style", "script"}
)

ANIMATION_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"animate", "animateColor", "animateMotion", "animateTransform", "set"}
)

# Elements that draw something (or group things that do)
RENDERABLE_ELEMENTS: Final[frozenset[str]] = SHAPE_ELEMENTS | frozenset(
    {"a", "g", "image", "svg", "switch", "text", "tspan", "textPath", "use", "foreignObject"}
)

# Containers that can be dropped when they end up with no children
CONTAINER_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"a", "defs", "g", "marker", "mask", "missing-glyph", "pattern", "switch", "symbol"}
)

# Elements whose content is referenced instead of rendered in place
REFERENCE_SCOPE_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"clipPath", "defs", "linearGradient", "marker", "mask", "pattern", "radialGradient", "symbol"}
)

INHERITABLE_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    {
        "clip-rule",
        "color",
        "color-interpolation",
        "color-interpolation-filters",
        "color-rendering",
        "cursor",
        "direction",
        "dominant-baseline",
        "fill",
        "fill-opacity",
        "fill-rule",
        "font",
        "font-family",
        "font-size",
        "font-size-adjust",
        "font-stretch",
        "font-style",
        "font-variant",
        "font-weight",
        "glyph-orientation-horizontal",
        "glyph-orientation-vertical",
        "image-rendering",
        "letter-spacing",
        "marker",
        "marker-end",
        "marker-mid",
        "marker-start",
        "paint-order",
        "pointer-events",
        "shape-rendering",
        "stroke",
        "stroke-dasharray",
        "stroke-dashoffset",
        "stroke-linecap",
        "stroke-linejoin",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
        "text-anchor",
        "text-rendering",
        "visibility",
        "word-spacing",
        "writing-mode",
    }
)

PRESENTATION_ATTRIBUTES: Final[frozenset[str]] = INHERITABLE_ATTRIBUTES | frozenset(
    {
        "alignment-baseline",
        "baseline-shift",
        "clip",
        "clip-path",
        "display",
        "enable-background",
        "filter",
        "flood-color",
        "flood-opacity",
        "lighting-color",
        "mask",
        "opacity",
        "overflow",
        "stop-color",
        "stop-opacity",
        "text-decoration",
        "unicode-bidi",
        "vector-effect",
    }
)

# Initial values of presentation attributes
ATTRIBUTE_DEFAULTS: Final[dict[str, str]] = {
    "clip-rule": "nonzero",
    "display": "inline",
    "fill": "#000",
    "fill-opacity": "1",
    "fill-rule": "nonzero",
    "flood-opacity": "1",
    "font-style": "normal",
    "font-variant": "normal",
    "opacity": "1",
    "stop-opacity": "1",
    "stroke": "none",
    "stroke-dasharray": "none",
    "stroke-dashoffset": "0",
    "stroke-linecap": "butt",
    "stroke-linejoin": "miter",
    "stroke-miterlimit": "4",
    "stroke-opacity": "1",
    "stroke-width": "1",
    "text-anchor": "start",
    "visibility": "visible",
}

TRANSFORM_ATTRIBUTES: Final[tuple[str, ...]] = (
    "transform",
    "gradientTransform",
    "patternTransform",
)

# Attributes holding a single number or length
NUMERIC_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    {
        "cx",
        "cy",
        "fill-opacity",
        "flood-opacity",
        "font-size",
        "fr",
        "fx",
        "fy",
        "height",
        "letter-spacing",
        "offset",
        "opacity",
        "r",
        "rx",
        "ry",
        "stop-opacity",
        "stroke-dashoffset",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
        "width",
        "word-spacing",
        "x",
        "x1",
        "x2",
        "y",
        "y1",
        "y2",
    }
)

# Attributes holding a list of numbers or lengths
LIST_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    {"viewBox", "points", "stroke-dasharray", "enable-background", "dx", "dy", "rotate", "x", "y"}
)

# Conditional processing attributes: an empty value is meaningful
CONDITIONAL_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    {"requiredExtensions", "requiredFeatures", "systemLanguage"}
)

# Namespaces written by drawing applications and of no use to renderers
EDITOR_NAMESPACES: Final[frozenset[str]] = frozenset(
    {
        "http://inkscape.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://www.inkscape.org/namespaces/inkscape",
        "http://ns.adobe.com/AdobeIllustrator/10.0/",
        "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
        "http://ns.adobe.com/Extensibility/1.0/",
        "http://ns.adobe.com/Flows/1.0/",
        "http://ns.adobe.com/GenericCustomNamespace/1.0/",
        "http://ns.adobe.com/Graphs/1.0/",
        "http://ns.adobe.com/ImageReplacement/1.0/",
        "http://ns.adobe.com/SaveForWeb/1.0/",
        "http://ns.adobe.com/Variables/1.0/",
        "http://ns.adobe.com/XPath/1.0/",
        "http://schemas.microsoft.com/visio/2003/SVGExtensions/",
        "http://taptrix.com/vectorillustrator/svg_extensions",
        "http://www.bohemiancoding.com/sketch/ns",
        "http://www.figma.com/figma/ns",
        "http://www.serif.com/",
        "http://www.vector.evaxdesign.sk",
    }
)

# Canonical attribute order used by sortAttrs (after namespace declarations)
ATTRIBUTE_ORDER: Final[tuple[str, ...]] = (
    "id",
    "width",
    "height",
    "x",
    "x1",
    "x2",
    "y",
    "y1",
    "y2",
    "cx",
    "cy",
    "r",
    "fill",
    "stroke",
    "marker",
    "d",
    "points",
)

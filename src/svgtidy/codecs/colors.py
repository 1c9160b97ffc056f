# topmark:header:start
#
#   project      : svgtidy
#   file         : colors.py
#   file_relpath : src/svgtidy/codecs/colors.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Color parsing and shortening.

`minify_color` rewrites a paint value to its shortest equivalent spelling:

- ``rgb(r, g, b)`` (integers or percentages) becomes hex;
- a named color becomes hex when the hex form is shorter;
- ``#aabbcc`` becomes ``#abc``.

Values it does not understand (``none``, ``currentColor``, ``url(#id)``, system
colors, colors with alpha) are returned unchanged.

`NAMED_COLORS` is the CSS Color Module Level 4 keyword table. It is data: adding a
keyword is enough for both shortening and the equivalence checks made through
`parse_color`.
"""

from __future__ import annotations

import math
import re
from typing import Final

COLOR_ATTRIBUTES: Final[tuple[str, ...]] = (
    "fill",
    "stroke",
    "stop-color",
    "flood-color",
    "lighting-color",
    "color",
)

NAMED_COLORS: Final[dict[str, str]] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": "#00ffff",
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": "#00ffff",
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgreen": "#006400",
    "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "grey": "#808080",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
}

_HEX_RE: Final[re.Pattern[str]] = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_RGB_RE: Final[re.Pattern[str]] = re.compile(
    r"rgb\(\s*([-+]?[0-9.]+%?)\s*,\s*([-+]?[0-9.]+%?)\s*,\s*([-+]?[0-9.]+%?)\s*\)",
    re.IGNORECASE,
)


def _channel(text: str) -> int | None:
    try:
        if text.endswith("%"):
            value = float(text[:-1]) * 255.0 / 100.0
        else:
            value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    # Out-of-range channels clamp, as in CSS
    return max(0, min(255, int(value + 0.5)))


def parse_color(value: str) -> tuple[int, int, int] | None:
    """Return the RGB triple of a hex, ``rgb()`` or named color, or None."""
    text = value.strip()
    m = _HEX_RE.fullmatch(text)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    m = _RGB_RE.fullmatch(text)
    if m:
        groups = m.groups()
        # Mixing integers and percentages is invalid
        if len({g.endswith("%") for g in groups}) != 1:
            return None
        r, g, b = (_channel(group) for group in groups)
        if r is None or g is None or b is None:
            return None
        return r, g, b
    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return parse_color(named)
    return None


def short_hex(rgb: tuple[int, int, int]) -> str:
    """Return the shortest hex spelling of ``rgb`` (``#abc`` when possible)."""
    text = "#{:02x}{:02x}{:02x}".format(*rgb)
    if text[1] == text[2] and text[3] == text[4] and text[5] == text[6]:
        return f"#{text[1]}{text[3]}{text[5]}"
    return text


def minify_color(value: str) -> str:
    """Return the shortest equivalent spelling of a color value.

    Args:
        value (str): A paint or color attribute value.

    Returns:
        str: The shortened color, or ``value`` itself when it is not a plain color or
        no shorter spelling exists.
    """
    rgb = parse_color(value)
    if rgb is None:
        return value
    candidate = short_hex(rgb)
    if len(candidate) < len(value.strip()) or (
        len(candidate) == len(value.strip()) and value.strip().startswith("#")
    ):
        return candidate
    return value

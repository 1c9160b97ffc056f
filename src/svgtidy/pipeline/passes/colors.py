# topmark:header:start
#
#   project      : svgtidy
#   file         : colors.py
#   file_relpath : src/svgtidy/pipeline/passes/colors.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Color shortening pass."""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgtidy.codecs.colors import COLOR_ATTRIBUTES, minify_color
from svgtidy.pipeline.passes.base import BasePass
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from svgtidy.dom.model import Document


@register_pass("convertColors")
class ConvertColors(BasePass):
    """Shorten colors: ``rgb()`` to hex, names to hex when shorter, ``#aabbcc`` to ``#abc``."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            for name in COLOR_ATTRIBUTES:
                value = element.get(name)
                if value is not None:
                    element.set(name, minify_color(value))

# topmark:header:start
#
#   project      : svgtidy
#   file         : numeric.py
#   file_relpath : src/svgtidy/pipeline/passes/numeric.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Passes that re-encode numbers, lengths and transforms.

A value is only replaced when its new spelling is not longer than the old one,
and values that do not parse are left as they are.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from svgtidy.codecs.numbers import format_length, parse_length
from svgtidy.codecs.transform import minify_transform
from svgtidy.config.logging import get_logger
from svgtidy.constants import DEFAULT_DEG_PRECISION
from svgtidy.pipeline.passes.base import BasePass, NumericPass
from svgtidy.pipeline.passes.tables import LIST_ATTRIBUTES, NUMERIC_ATTRIBUTES, TRANSFORM_ATTRIBUTES
from svgtidy.pipeline.registry import register_pass

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.config.model import Config
    from svgtidy.dom.model import Document

logger: SvgtidyLogger = get_logger(__name__)

_LIST_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[\s,]+")

# List forms of x and y only exist on text content
_TEXT_POSITION_ELEMENTS: Final[frozenset[str]] = frozenset({"text", "tspan", "tref", "altGlyph"})


@register_pass("convertTransform")
@dataclass
class ConvertTransform(NumericPass):
    """Rewrite ``transform``, ``gradientTransform`` and ``patternTransform`` in their shortest form.

    Identity transforms are removed.
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
        for element in doc.iter_elements():
            for name in TRANSFORM_ATTRIBUTES:
                value = element.get(name)
                if value is None:
                    continue
                minified = minify_transform(
                    value,
                    precision=self.precision,
                    deg_precision=self.deg_precision,
                    remove_leading_zero=self.remove_leading_zero,
                )
                if minified is None:
                    continue
                if minified == "":
                    element.pop(name)
                elif len(minified) <= len(value):
                    element.set(name, minified)


@dataclass
class _LengthPass(NumericPass):
    """Base for passes formatting lengths.

    Attributes:
        remove_px (bool): Drop the ``px`` unit.
        convert_to_px (bool): Convert absolute units to user units when shorter.
    """

    remove_px: bool = True
    convert_to_px: bool = True

    @classmethod
    def from_config(cls, config: Config) -> BasePass:
        return cls(
            precision=config.precision,
            remove_leading_zero=config.remove_leading_zero,
            remove_px=config.remove_px,
            convert_to_px=config.convert_to_px,
        )

    def format(self, text: str) -> str | None:
        """Return the shortest spelling of one length, or None if it does not parse."""
        length = parse_length(text)
        if length is None:
            return None
        value, unit = length
        return format_length(
            value,
            unit,
            self.precision,
            remove_px=self.remove_px,
            convert_to_px=self.convert_to_px,
            remove_leading_zero=self.remove_leading_zero,
        )


@register_pass("cleanupNumericValues")
@dataclass
class CleanupNumericValues(_LengthPass):
    """Round single numeric values, drop ``px`` and shorten absolute units."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            for name, value in element.attributes.items():
                if name not in NUMERIC_ATTRIBUTES:
                    continue
                formatted = self.format(value)
                if formatted is not None and len(formatted) <= len(value):
                    element.attributes[name] = formatted


@register_pass("cleanupListOfValues")
@dataclass
class CleanupListOfValues(_LengthPass):
    """Round every item of list attributes (``viewBox``, ``points``, ``stroke-dasharray``, ...)."""

    def apply(self, doc: Document) -> None:
        for element in doc.iter_elements():
            for name, value in element.attributes.items():
                if name not in LIST_ATTRIBUTES:
                    continue
                if name in ("x", "y") and element.name not in _TEXT_POSITION_ELEMENTS:
                    continue
                tokens = [t for t in _LIST_SEPARATOR_RE.split(value.strip()) if t]
                if not tokens:
                    continue
                formatted = [self.format(token) for token in tokens]
                if any(item is None for item in formatted):
                    continue
                joined = " ".join(item for item in formatted if item is not None)
                if len(joined) <= len(value):
                    element.attributes[name] = joined

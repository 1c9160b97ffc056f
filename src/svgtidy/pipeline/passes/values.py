# topmark:header:start
#
#   project      : svgtidy
#   file         : values.py
#   file_relpath : src/svgtidy/pipeline/passes/values.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Canonical attribute values for equivalence checks.

Structural passes decide things like "do all children share this fill?" or "is
this value the initial value?". Those decisions must not change once the value
formatting passes have run, otherwise a second run of the pipeline would find new
opportunities. Comparing canonical values, rounded at the precision the
formatting passes use, keeps the decisions stable: ``red``, ``#f00`` and
``rgb(255,0,0)`` compare equal, as do ``0.50`` and ``.5``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgtidy.codecs.colors import COLOR_ATTRIBUTES, parse_color
from svgtidy.codecs.numbers import parse_length, round_value
from svgtidy.codecs.transform import FACTOR_EXTRA_DIGITS, compose, parse_transform
from svgtidy.pipeline.passes.tables import TRANSFORM_ATTRIBUTES

if TYPE_CHECKING:
    from collections.abc import Hashable


def canonical_value(name: str, value: str, precision: int | None = None) -> Hashable:
    """Return a hashable canonical form of an attribute value.

    Args:
        name (str): Attribute name (selects the value grammar).
        value (str): Raw attribute value.
        precision (int | None): Rounding applied to numbers; None compares exactly.

    Returns:
        Hashable: A tuple tagged with the value kind.
    """
    text = " ".join(value.split())
    if name in COLOR_ATTRIBUTES:
        rgb = parse_color(text)
        if rgb is not None:
            return ("color", rgb)
    if name in TRANSFORM_ATTRIBUTES:
        functions = parse_transform(text)
        if functions is not None:
            matrix = compose(functions)
            factor = None if precision is None else precision + FACTOR_EXTRA_DIGITS
            return (
                "matrix",
                tuple(round_value(v, factor) for v in matrix[:4])
                + tuple(round_value(v, precision) for v in matrix[4:]),
            )
    length = parse_length(text)
    if length is not None:
        number, unit = length
        return ("length", round_value(number, precision), "" if unit == "px" else unit)
    return ("text", text)


def equivalent(name: str, first: str, second: str, precision: int | None = None) -> bool:
    """Return True if two values of attribute ``name`` mean the same thing."""
    if first == second:
        return True
    return canonical_value(name, first, precision) == canonical_value(name, second, precision)


def is_zero(value: str | None) -> bool:
    """Return True if ``value`` is a number (or length) equal to zero."""
    if value is None:
        return False
    length = parse_length(value)
    return length is not None and length[0] == 0
